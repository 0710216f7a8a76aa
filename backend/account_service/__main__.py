# account_service/__main__.py
"""Run the API with uvicorn: python -m account_service"""
import uvicorn

from account_service.config import settings

if __name__ == "__main__":
    uvicorn.run("account_service.main:app", host=settings.host, port=settings.port)
