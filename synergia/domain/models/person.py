"""Person domain model: customers and mechanics."""

from sqlalchemy import Column, Integer, String, Text

from synergia.infrastructure.database import Base


class Person(Base):
    __tablename__ = "persons"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(300), nullable=True, index=True)
    nome_fantasia = Column(String(300), nullable=True)
    tipo = Column(String(20), nullable=True)  # Cliente, Mecânico, Ambos
    cpf_cnpj = Column(String(20), nullable=True)
    telefone = Column(String(20), nullable=True)
    email = Column(String(255), nullable=True)
    cep = Column(String(10), nullable=True)
    endereco = Column(String(300), nullable=True)
    bairro = Column(String(200), nullable=True)
    cidade = Column(String(200), nullable=True)
    observacao = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Person {self.id} {self.nome}>"
