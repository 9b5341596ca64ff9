"""
Service context extraction for log traceability.

Tags each log line with the embedding service, its deploy environment and
the process that produced it.
"""

from functools import lru_cache
import os


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'seating-core')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    return f'{service_name}@{deploy_env}:{os.getpid()}'
