"""API test harness.

The app runs inside TestClient with its infrastructure swapped through
``app.dependency_overrides``:

- get_db_session: sessions on a per-test SQLite file
- get_cache: InMemoryCache (inspect or break the identity cache)
- get_email_service: RecordingEmailService (read links out of sent mail)
- get_password_service: FakePasswordService (no bcrypt cost in API tests)

Schema creation and seeding run through the client's portal so they share
the event loop the requests are served on.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qs, urlparse

import pytest
from fastapi.testclient import TestClient

from src.core.container import (
    get_cache,
    get_db_session,
    get_email_service,
    get_password_service,
)
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.seeds import run_all_seeders
from src.infrastructure.persistence.seeds.rbac_seeder import DEFAULT_PASSWORD
from src.main import app
from tests.conftest import (
    FakePasswordService,
    InMemoryCache,
    RecordingEmailService,
)

API = "/api/v1"
SUPERUSER_EMAIL = "superuser@example.com"
ADMIN_EMAIL = "admin@example.com"
MEMBER_PASSWORD = "SecurePass123!"


@dataclass
class ApiHarness:
    """TestClient plus handles on the swapped infrastructure."""

    client: TestClient
    database: Database
    cache: InMemoryCache
    email: RecordingEmailService

    def login(self, email: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        """Log in and return the Authorization header."""
        response = self.client.post(
            f"{API}/auth/login", json={"email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    def root(self) -> dict[str, str]:
        return self.login(SUPERUSER_EMAIL)

    def permission_ids(self, *names: str) -> list[str]:
        response = self.client.get(
            f"{API}/settings/select/permissions", headers=self.root()
        )
        by_name = {
            permission["name"]: permission["id"]
            for group in response.json()
            for permission in group["permissions"]
        }
        return [by_name[name] for name in names]

    def create_role(self, name: str, *permission_names: str) -> dict[str, Any]:
        response = self.client.post(
            f"{API}/settings/roles",
            headers=self.root(),
            json={"name": name, "permission_ids": self.permission_ids(*permission_names)},
        )
        assert response.status_code == 201, response.text
        return response.json()

    def create_member(
        self, email: str, role_ids: list[str] | None = None
    ) -> dict[str, Any]:
        """Create a verified, active user through the settings API."""
        response = self.client.post(
            f"{API}/settings/users",
            headers=self.root(),
            json={
                "name": "Member",
                "email": email,
                "password": MEMBER_PASSWORD,
                "role_ids": role_ids or [],
                "verified": True,
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    def member_with(self, email: str, *permission_names: str) -> dict[str, str]:
        """Create a member holding exactly ``permission_names`` and log in."""
        role = self.create_role(f"role for {email}", *permission_names)
        self.create_member(email, [role["id"]])
        return self.login(email, MEMBER_PASSWORD)

    def token_from_last(self, kind: str) -> str:
        sent = self.email.last_sent(kind)
        assert sent is not None, f"no {kind} email sent"
        return parse_qs(urlparse(sent.url).query)["token"][0]


async def _prepare(database: Database) -> None:
    await database.create_all()
    async with database.get_session() as session:
        await run_all_seeders(session, FakePasswordService())


@pytest.fixture
def api(database_url) -> Iterator[ApiHarness]:
    database = Database(database_url)
    cache = InMemoryCache()
    email_service = RecordingEmailService()
    password_service = FakePasswordService()

    async def override_db_session():
        async with database.get_session() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_cache] = lambda: cache
    app.dependency_overrides[get_email_service] = lambda: email_service
    app.dependency_overrides[get_password_service] = lambda: password_service

    try:
        with TestClient(app, raise_server_exceptions=False) as client:
            client.portal.call(_prepare, database)
            yield ApiHarness(
                client=client, database=database, cache=cache, email=email_service
            )
            client.portal.call(database.close)
    finally:
        app.dependency_overrides.clear()
