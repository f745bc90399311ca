"""Company letterhead: a single row with a fixed id."""

from sqlalchemy import Column, Integer, String

from synergia.infrastructure.database import Base

COMPANY_DATA_ID = 1


class CompanyData(Base):
    __tablename__ = "company_data"

    id = Column(Integer, primary_key=True, default=COMPANY_DATA_ID)
    nome_empresa = Column(String(300), nullable=True)
    cnpj = Column(String(20), nullable=True)
    cep = Column(String(10), nullable=True)
    endereco = Column(String(300), nullable=True)
    bairro = Column(String(200), nullable=True)
    cidade = Column(String(200), nullable=True)
    telefone = Column(String(20), nullable=True)
    email = Column(String(255), nullable=True)

    def __repr__(self):
        return f"<CompanyData {self.nome_empresa}>"
