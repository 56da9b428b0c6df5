# FastAPI routers grouped under app.api.*
from . import consultations

__all__ = ["consultations"]
