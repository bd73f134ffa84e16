# loja_api/adapters/outbound/persistence/models/base_model.py

from sqlalchemy.orm import declarative_base

# Classe pai de todos os modelos ORM, usada para controle de metadados
Base = declarative_base()
