"""
Seeds the service catalog. Rows come from `data/services.csv` as `name,price,description`.
"""

import csv
import logging
import os

from config import ENVIRONMENT
from db.database import SessionLocal
from repository.salon_service_repository import SalonServiceRepository
from schemas.salon_service import CreateSalonService

logger = logging.getLogger(__name__)

SERVICES_CSV = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'data', 'services.csv')


def init_data(path=SERVICES_CSV):
    # test runs start from an empty catalog
    if ENVIRONMENT == 'test':
        return

    if not os.path.exists(path):
        logger.warning(f'No service catalog found at {path}, skipping seed')
        return

    logger.info('Inserting service catalog started')
    session = SessionLocal()
    try:
        repository = SalonServiceRepository(session)

        with open(path, 'r', encoding='utf-8') as data:
            inserted = 0
            for line in csv.reader(data):
                if not line:
                    continue

                name, price, description = line[0], line[1], line[2] if len(line) > 2 else ''
                if repository.exist_by_name(name):
                    continue

                repository.create(CreateSalonService(name=name, price=float(price), description=description))
                inserted += 1
    finally:
        session.close()

    logger.info(f'Inserting service catalog ended, {inserted} new services')
