"""
Destination catalog - The fixed set of destinations and their page routes.
"""
from pydantic import BaseModel, Field
from typing import Iterator, Mapping


class Destination(BaseModel):
    """A single catalog entry."""
    name: str = Field(..., description="Display name, also the catalog key")
    link: str = Field(..., description="Route path of the destination page")
    
    class Config:
        frozen = True


class DestinationCatalog:
    """
    Immutable, ordered collection of destinations.
    
    Built once at startup and shared read-only by every request.
    """
    
    def __init__(self, destinations: tuple[Destination, ...]):
        self._destinations = tuple(destinations)
    
    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "DestinationCatalog":
        """Build a catalog from a name -> link mapping, keeping its order."""
        return cls(tuple(
            Destination(name=name, link=link) for name, link in mapping.items()
        ))
    
    def __iter__(self) -> Iterator[Destination]:
        return iter(self._destinations)
    
    def __len__(self) -> int:
        return len(self._destinations)
    
    def search(self, key: str) -> list[Destination]:
        """
        Case-insensitive substring search over display names.
        
        An empty key matches everything. Results keep catalog order.
        """
        needle = key.lower()
        return [d for d in self._destinations if needle in d.name.lower()]
