"""
Maps API Endpoints
Points of interest (pharmacies, hospitals...) shown on the map.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from emur.api.v1.deps import require_admin, require_member
from emur.db.session import get_db
from emur.schemas.common import APIResponse, envelope
from emur.schemas.map import MapCreate, MapResponse, MapUpdate
from emur.services.map_service import MapService


router = APIRouter(prefix="/maps")


@router.get("", response_model=APIResponse, dependencies=[Depends(require_member)])
def list_maps(db: Session = Depends(get_db)):
    locations = MapService(db).list_locations()
    return envelope(status.HTTP_200_OK, "Maps retrieved successfully",
                    [MapResponse.model_validate(m) for m in locations])


@router.post("", response_model=APIResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_admin)])
def create_map(data: MapCreate, db: Session = Depends(get_db)):
    location = MapService(db).create(data)
    return envelope(status.HTTP_201_CREATED, "Map created successfully", MapResponse.model_validate(location))


@router.put("/{map_uuid}", response_model=APIResponse, dependencies=[Depends(require_admin)])
def update_map(map_uuid: UUID, data: MapUpdate, db: Session = Depends(get_db)):
    location = MapService(db).update(map_uuid, data)
    return envelope(status.HTTP_200_OK, "Map updated successfully", MapResponse.model_validate(location))


@router.delete("/{map_uuid}", response_model=APIResponse, dependencies=[Depends(require_admin)])
def delete_map(map_uuid: UUID, db: Session = Depends(get_db)):
    MapService(db).delete(map_uuid)
    return envelope(status.HTTP_200_OK, "Map deleted successfully")
