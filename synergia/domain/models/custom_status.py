"""User-defined status labels and their badge colours."""

from sqlalchemy import JSON, Column, Integer, String

from synergia.infrastructure.database import Base


class CustomStatus(Base):
    __tablename__ = "statuses"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(100), nullable=True, unique=True, index=True)
    cor = Column(String(20), nullable=True)  # hex, e.g. #22C55E
    aplicavel_em = Column(JSON, nullable=True)  # subset of garantia, lote, devolucao, acao

    def __repr__(self):
        return f"<CustomStatus {self.nome}>"
