# account_service/__init__.py
"""
Account service: user registration, credential check and user CRUD over HTTP.
"""
