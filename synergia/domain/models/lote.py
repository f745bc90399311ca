"""Lote (batch) domain model: warranties shipped together to a supplier."""

from sqlalchemy import JSON, Column, Integer, String

from synergia.infrastructure.database import Base


class Lote(Base):
    __tablename__ = "lotes"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(200), nullable=True)
    fornecedor = Column(String(300), nullable=True, index=True)
    data_criacao = Column(String(40), nullable=True)
    data_envio = Column(String(40), nullable=True)
    nota_fiscal_saida = Column(String(100), nullable=True)
    notas_fiscais_retorno = Column(String(300), nullable=True)
    status = Column(String(100), nullable=True)
    attachments = Column(JSON, nullable=True)  # [{"name": ..., "url": ...}]

    def __repr__(self):
        return f"<Lote {self.id} {self.nome}>"
