"""Supplier domain model."""

from sqlalchemy import Column, Integer, String

from synergia.infrastructure.database import Base


class Supplier(Base):
    __tablename__ = "suppliers"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    razao_social = Column(String(300), nullable=True)
    nome_fantasia = Column(String(300), nullable=True, index=True)
    cnpj = Column(String(20), nullable=True)
    cidade = Column(String(200), nullable=True)
    cep = Column(String(10), nullable=True)
    endereco = Column(String(300), nullable=True)
    bairro = Column(String(200), nullable=True)

    def __repr__(self):
        return f"<Supplier {self.id} {self.nome_fantasia}>"
