"""
AWS Lambda entry point (handler setting: ``lambda_function.lambda_handler``).

Configuration is read at import, so a missing DYNAMODB_TABLE_NAME fails the
cold start instead of individual requests.
"""

from user_registry.app import create_lambda_handler

lambda_handler = create_lambda_handler()
