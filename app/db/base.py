from sqlalchemy.orm import declarative_base

# master directory tables
Base = declarative_base()
