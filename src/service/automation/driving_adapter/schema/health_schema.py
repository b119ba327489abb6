from datetime import datetime
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: str = 'UP'
    timestamp: datetime
    service: str
    version: str
    active_subscribers: int = Field(alias='activeSubscribers')

    model_config = ConfigDict(populate_by_name=True)


class ServiceInfoResponse(BaseModel):
    name: str
    description: str
    version: str
    endpoints: Dict[str, str]
