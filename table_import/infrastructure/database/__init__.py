"""
Acceso a base de datos del importador.
"""
from table_import.infrastructure.database.session import create_db_engine
from table_import.infrastructure.database.table_gateway import SqlAlchemyTableGateway
