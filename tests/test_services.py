from db import db_uploader
from db.models import SalonService
from tests.conftest import client, TestingSessionLocal


class TestServiceRoute:
    def test_get_services_should_return_empty_list_with_no_service_data(self, test_db):
        response = client.get("/api/services")

        assert response.status_code == 200, response.text
        assert response.json() == []

    def test_get_services_should_not_require_token(self, test_db):
        session = TestingSessionLocal()
        session.add(SalonService(name='Haircut', price=25.0, description='Wash, cut and style'))
        session.commit()
        session.close()

        response = client.get("/api/services")

        assert response.status_code == 200, response.text
        assert response.json() == [{
            "id": 1,
            "name": "Haircut",
            "price": 25.0,
            "description": "Wash, cut and style"
        }]


class TestInitData:
    def test_init_data_should_skip_in_test_environment(self, test_db, monkeypatch):
        monkeypatch.setattr(db_uploader, 'SessionLocal', TestingSessionLocal)

        db_uploader.init_data()

        session = TestingSessionLocal()
        assert session.query(SalonService).count() == 0
        session.close()

    def test_init_data_should_insert_catalog_once(self, test_db, monkeypatch, tmp_path):
        catalog = tmp_path / 'services.csv'
        catalog.write_text('Haircut,25.0,"Wash, cut and style"\nManicure,18.5,Classic manicure\n',
                           encoding='utf-8')
        monkeypatch.setattr(db_uploader, 'SessionLocal', TestingSessionLocal)
        monkeypatch.setattr(db_uploader, 'ENVIRONMENT', 'dev')

        db_uploader.init_data(str(catalog))
        db_uploader.init_data(str(catalog))

        session = TestingSessionLocal()
        services = session.query(SalonService).order_by(SalonService.id).all()
        assert [(s.name, s.price, s.description) for s in services] == [
            ('Haircut', 25.0, 'Wash, cut and style'),
            ('Manicure', 18.5, 'Classic manicure'),
        ]
        session.close()


class TestHealth:
    def test_read_root(self):
        response = client.get("/")

        assert response.status_code == 200, response.text
        assert response.json() == {"status": "ok"}
