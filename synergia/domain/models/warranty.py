"""Warranty domain model: maps to the 'garantias' table."""

from sqlalchemy import JSON, Column, Float, ForeignKey, Integer, String, Text

from synergia.infrastructure.database import Base


class Warranty(Base):
    __tablename__ = "garantias"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Part and claim
    codigo = Column(String(100), nullable=True, index=True)
    descricao = Column(Text, nullable=True)
    fornecedor = Column(String(300), nullable=True)
    quantidade = Column(Float, nullable=True)
    defeito = Column(Text, nullable=True)

    # Linked documents
    requisicao_venda = Column(String(100), nullable=True)
    requisicoes_garantia = Column(String(300), nullable=True)
    nf_compra = Column(String(100), nullable=True)
    valor_compra = Column(String(50), nullable=True)
    nota_fiscal_retorno = Column(String(100), nullable=True)
    nota_fiscal_saida = Column(String(100), nullable=True)

    # People
    cliente = Column(String(300), nullable=True, index=True)
    mecanico = Column(String(300), nullable=True)

    observacao = Column(Text, nullable=True)
    data_registro = Column(String(40), nullable=True)  # ISO-8601, written once
    status = Column(String(100), nullable=True)
    lote_id = Column(Integer, ForeignKey("lotes.id", ondelete="SET NULL"), nullable=True, index=True)
    photos = Column(JSON, nullable=True)

    def __repr__(self):
        return f"<Warranty {self.id} {self.codigo}>"
