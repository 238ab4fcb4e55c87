from sqlalchemy.orm import Session
from db.models import SalonService
from typing import List, Optional

from schemas.salon_service import SalonServiceBase, CreateSalonService


class SalonServiceRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> List[Optional[SalonServiceBase]]:
        salon_services = self.session.query(SalonService).order_by(SalonService.id).all()
        return [SalonServiceBase(**salon_service.__dict__) for salon_service in salon_services]

    def create(self, data: CreateSalonService) -> SalonServiceBase:
        salon_service = SalonService(**data.model_dump(exclude_none=True))
        self.session.add(salon_service)
        self.session.commit()
        self.session.refresh(salon_service)

        return SalonServiceBase(**salon_service.__dict__)

    def exist_by_name(self, name: str) -> bool:
        salon_service = self.session.query(SalonService).filter_by(name=name).first()
        return salon_service is not None
