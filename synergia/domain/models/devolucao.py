"""Devolucao (customer return) aggregate: the return and its owned line items."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from synergia.infrastructure.database import Base


class Devolucao(Base):
    __tablename__ = "devolucoes"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    cliente = Column(String(300), nullable=True, index=True)
    mecanico = Column(String(300), nullable=True)
    requisicao_venda = Column(String(100), nullable=True)
    acao_requisicao = Column(String(20), nullable=True)  # Alterada, Excluída
    data_venda = Column(String(40), nullable=True)
    data_devolucao = Column(String(40), nullable=True)
    status = Column(String(100), nullable=True)
    observacao_geral = Column(Text, nullable=True)

    itens = relationship(
        "ItemDevolucao",
        back_populates="devolucao",
        cascade="all, delete-orphan",
        order_by="ItemDevolucao.id",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Devolucao {self.id} {self.requisicao_venda}>"


class ItemDevolucao(Base):
    __tablename__ = "itens_devolucao"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    devolucao_id = Column(
        Integer, ForeignKey("devolucoes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    codigo_peca = Column(String(100), nullable=True)
    descricao_peca = Column(Text, nullable=True)
    quantidade = Column(Float, nullable=True)

    devolucao = relationship("Devolucao", back_populates="itens")

    def __repr__(self):
        return f"<ItemDevolucao {self.id} of {self.devolucao_id}>"
