from __future__ import annotations

import asyncio

import pytest

from company_api.errors import CompanyNotFoundError
from company_api.merge import CompanyMerger, MergeStrategy
from company_api.models import Company, company_values
from company_api.repository import CompanyRepository
from company_api.schemas import CompanyPostModel
from company_api.service import CompanyService, company_from_post_model


@pytest.fixture
def run_service(session_factory):
    """Run ``fn(service, repository)`` inside one session and return its result."""

    def _run(fn, repository_cls=CompanyRepository):
        async def _inner():
            async with session_factory() as session:
                repo = repository_cls(session)
                return await fn(CompanyService(repo, CompanyMerger()), repo)

        return asyncio.run(_inner())

    return _run


class FailingCommitRepository(CompanyRepository):
    """Store whose commit fails after the in-session changes were made."""

    error: type[BaseException] = RuntimeError

    async def commit(self):
        raise self.error("commit interrupted")


class CancelledCommitRepository(FailingCommitRepository):
    error = asyncio.CancelledError


@pytest.fixture
def seeded(seed):
    seed(
        Company(id=1, name="Company A", street="Address A"),
        Company(id=2, name="Company B", street="Address B"),
    )


def test_list_companies_returns_rows_in_insertion_order(seeded, run_service):
    companies = run_service(lambda svc, repo: svc.list_companies())
    assert [c.name for c in companies] == ["Company A", "Company B"]


def test_list_companies_on_empty_store_returns_none(run_service):
    assert run_service(lambda svc, repo: svc.list_companies()) is None


def test_get_company_missing_raises(seeded, run_service):
    with pytest.raises(CompanyNotFoundError):
        run_service(lambda svc, repo: svc.get_company(999))


def test_delete_existing_company(seeded, run_service):
    run_service(lambda svc, repo: svc.delete_company(1))
    assert run_service(lambda svc, repo: repo.get(1)) is None
    assert run_service(lambda svc, repo: repo.count()) == 1


def test_delete_missing_company_leaves_store_untouched(seeded, run_service):
    with pytest.raises(CompanyNotFoundError) as exc_info:
        run_service(lambda svc, repo: svc.delete_company(999))
    assert exc_info.value.company_id == 999
    assert run_service(lambda svc, repo: repo.count()) == 2


def test_create_company_ignores_supplied_id(seeded, run_service):
    new = Company(id=1, name="New Company", pib="123456789", maticni_broj="12345678")

    new_id = run_service(lambda svc, repo: svc.create_company(new))

    assert new_id not in (1, 2)
    created = run_service(lambda svc, repo: repo.get(new_id))
    assert created.id == new_id
    assert created.name == "New Company"
    assert created.pib == "123456789"
    assert run_service(lambda svc, repo: repo.get(1)).name == "Company A"


@pytest.mark.parametrize("strategy", list(MergeStrategy))
def test_update_by_merge_applies_fields(seeded, run_service, strategy):
    patch = CompanyPostModel(name="Updated Company A", street="Updated Address A")

    run_service(lambda svc, repo: svc.update_company_by_merge(1, patch, strategy))

    updated = run_service(lambda svc, repo: repo.get(1))
    assert updated.name == "Updated Company A"
    assert updated.street == "Updated Address A"


@pytest.mark.parametrize("strategy", list(MergeStrategy))
def test_update_by_merge_missing_company_raises(seeded, run_service, strategy):
    patch = CompanyPostModel(name="Non Existent Company", street="Non Existent Address")
    with pytest.raises(CompanyNotFoundError):
        run_service(lambda svc, repo: svc.update_company_by_merge(999, patch, strategy))


@pytest.mark.parametrize("strategy", list(MergeStrategy))
def test_update_by_merge_ignores_null_and_whitespace(seeded, run_service, strategy):
    before = company_values(run_service(lambda svc, repo: repo.get(2)))
    patch = CompanyPostModel(name="  ", street=None)

    run_service(lambda svc, repo: svc.update_company_by_merge(2, patch, strategy))

    after = run_service(lambda svc, repo: repo.get(2))
    assert after.name == "Company B"
    assert after.street == "Address B"
    assert company_values(after) == before


def test_replace_company_overwrites_blanks_and_keeps_id(seeded, run_service):
    replacement = company_from_post_model(CompanyPostModel(name="Replaced", is_active=True))
    replacement.id = 42

    run_service(lambda svc, repo: svc.replace_company(2, replacement))

    stored = run_service(lambda svc, repo: repo.get(2))
    assert company_values(stored) == {
        "id": 2,
        "name": "Replaced",
        "city": "",
        "street": "",
        "pib": "",
        "maticni_broj": "",
        "is_active": True,
    }
    assert run_service(lambda svc, repo: repo.get(42)) is None


def test_replace_missing_company_raises(seeded, run_service):
    with pytest.raises(CompanyNotFoundError):
        run_service(lambda svc, repo: svc.replace_company(999, Company(name="X")))


def test_company_from_post_model_defaults():
    company = company_from_post_model(CompanyPostModel())
    assert company.id is None
    assert (company.name, company.city, company.is_active) == ("", "", False)


def test_out_of_range_id_is_not_found(seeded, run_service):
    with pytest.raises(CompanyNotFoundError):
        run_service(lambda svc, repo: svc.get_company(2**64))
    with pytest.raises(CompanyNotFoundError):
        run_service(lambda svc, repo: svc.delete_company(2**31))


# ---------------------------------------------------------------------------
# Interrupted commits leave no partial write
# ---------------------------------------------------------------------------

INTERRUPTED = [FailingCommitRepository, CancelledCommitRepository]


@pytest.mark.parametrize("repository_cls", INTERRUPTED)
@pytest.mark.parametrize("strategy", list(MergeStrategy))
def test_interrupted_merge_leaves_row_unchanged(seeded, run_service, repository_cls, strategy):
    before = company_values(run_service(lambda svc, repo: repo.get(1)))
    patch = CompanyPostModel(name="Half Written", city="Nowhere", is_active=True)

    with pytest.raises(repository_cls.error):
        run_service(lambda svc, repo: svc.update_company_by_merge(1, patch, strategy), repository_cls)

    assert company_values(run_service(lambda svc, repo: repo.get(1))) == before


@pytest.mark.parametrize("repository_cls", INTERRUPTED)
def test_interrupted_replace_leaves_row_unchanged(seeded, run_service, repository_cls):
    before = company_values(run_service(lambda svc, repo: repo.get(2)))
    replacement = company_from_post_model(CompanyPostModel(name="Replaced"))

    with pytest.raises(repository_cls.error):
        run_service(lambda svc, repo: svc.replace_company(2, replacement), repository_cls)

    assert company_values(run_service(lambda svc, repo: repo.get(2))) == before


@pytest.mark.parametrize("repository_cls", INTERRUPTED)
def test_interrupted_delete_keeps_row(seeded, run_service, repository_cls):
    with pytest.raises(repository_cls.error):
        run_service(lambda svc, repo: svc.delete_company(1), repository_cls)

    assert run_service(lambda svc, repo: repo.count()) == 2
    assert run_service(lambda svc, repo: repo.get(1)).name == "Company A"


@pytest.mark.parametrize("repository_cls", INTERRUPTED)
def test_interrupted_create_inserts_nothing(seeded, run_service, repository_cls):
    with pytest.raises(repository_cls.error):
        run_service(lambda svc, repo: svc.create_company(Company(name="Ghost")), repository_cls)

    assert run_service(lambda svc, repo: repo.count()) == 2
