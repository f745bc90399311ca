"""Product domain model: catalog searched from the warranty and return forms."""

from sqlalchemy import Column, Integer, String, Text

from synergia.infrastructure.database import Base


class Product(Base):
    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    codigo = Column(String(100), nullable=True, unique=True, index=True)
    descricao = Column(Text, nullable=True)
    referencia = Column(String(100), nullable=True)
    marca = Column(String(100), nullable=True)

    def __repr__(self):
        return f"<Product {self.codigo} - {self.descricao}>"
