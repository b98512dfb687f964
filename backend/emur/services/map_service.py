"""
Map Service
Points of interest maintained by administrators.
"""

from typing import List
from uuid import UUID

from emur.models.map import MapLocation
from emur.repositories.base import PersistenceError
from emur.repositories.health import MapRepository
from emur.schemas.map import MapCreate, MapUpdate
from emur.services.base import BaseService


class MapService(BaseService):
    def __init__(self, db):
        super().__init__(db)
        self.maps = MapRepository(db)

    def list_locations(self) -> List[MapLocation]:
        return self.maps.find(order_by=MapLocation.name)

    def create(self, data: MapCreate) -> MapLocation:
        location = MapLocation(**data.model_dump())
        try:
            self.maps.create_with_omit(location, "uuid")
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("creating map", e)
        return location

    def update(self, location_uuid: UUID, data: MapUpdate) -> MapLocation:
        location = self.get_or_404(self.maps, location_uuid, "map")
        for field, value in data.model_dump().items():
            setattr(location, field, value)
        try:
            self.maps.update(location)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("updating map", e)
        return location

    def delete(self, location_uuid: UUID) -> None:
        location = self.get_or_404(self.maps, location_uuid, "map")
        try:
            self.maps.delete(location)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("deleting map", e)
