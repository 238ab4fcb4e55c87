from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from db.database import get_db
from schemas import salon_service
from service.catalog_service import CatalogService

service_router = APIRouter(
    prefix='/services',
    tags=['Services']
)


@service_router.get('', response_model=List[salon_service.SalonServiceBase], name='List services')
def get_services(db: Session = Depends(get_db)):
    """
    Returns the salon's service catalog.
    """
    catalog_service = CatalogService(db)
    return catalog_service.get_services()
