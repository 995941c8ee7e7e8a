"""Short URL service: FastAPI front end over a SQLAlchemy-backed URL store."""

__version__ = "1.0.0"
