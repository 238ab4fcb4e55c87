from typing import List, Optional

from sqlalchemy.orm import Session

from exceptions import DuplicateService
from repository.salon_service_repository import SalonServiceRepository
from schemas.salon_service import SalonServiceBase, CreateSalonService


class CatalogService:
    def __init__(self, session: Session):
        self.repository = SalonServiceRepository(session)

    def get_services(self) -> List[Optional[SalonServiceBase]]:
        return self.repository.get_all()

    def create_service(self, new_service: CreateSalonService) -> SalonServiceBase:
        if self.repository.exist_by_name(new_service.name):
            raise DuplicateService(new_service.name)

        return self.repository.create(new_service)
