"""Serverless entry point (AWS Lambda / API Gateway style events)."""

from mangum import Mangum

from .main import app

handler = Mangum(app)
