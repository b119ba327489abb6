"""
Service context for log lines.

Identifies which process wrote a log line, so several API instances behind
one load balancer can be told apart in the aggregated logs.
"""

from functools import lru_cache
import os
import socket


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'scenario-automation')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Containers get a short random hostname; locally the PID is more useful
    instance_id = os.getenv('HOSTNAME') or socket.gethostname()
    if deploy_env == 'local_dev':
        instance_id = str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id[:12]}'
