from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field


T = TypeVar('T')


class PageResponse(BaseModel, Generic[T]):
    content: List[T]
    page: int
    size: int
    total_elements: int = Field(alias='totalElements')
    total_pages: int = Field(alias='totalPages')

    model_config = ConfigDict(populate_by_name=True)
