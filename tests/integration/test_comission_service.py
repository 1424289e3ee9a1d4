"""Integration tests for ComissionService with a real database

Fixture layout: two customers, each with one account and two
transactions (Jan 10 and Feb 10), each transaction carrying one
commission.
"""

import uuid
from datetime import datetime, timezone

import pytest

from src.adapter.repositories import SqlAlchemyComissionRepository, SqlAlchemyTransactionRepository
from src.app.exceptions import EntityNotFoundException
from src.app.use_cases.reporting import ComissionService
from tests.fixtures.entities import build_account, build_commission, build_customer, build_transaction

UTC = timezone.utc
JAN_31 = datetime(2024, 1, 31, tzinfo=UTC)
FEB_1 = datetime(2024, 2, 1, tzinfo=UTC)


def make_service(db_session, strict_filter=False):
    """Create ComissionService over real repositories"""
    return ComissionService(
        transaction_repo=SqlAlchemyTransactionRepository(db_session),
        comission_repo=SqlAlchemyComissionRepository(db_session),
        strict_filter=strict_filter,
    )


@pytest.fixture
def book(seed):
    """Seed the two-customer commission layout described above"""

    async def _book():
        result = {}
        entities = []
        for name in ("alice", "bob"):
            customer = build_customer(email=f"{name}@example.com")
            account = build_account(customer_id=customer.id)
            january = build_transaction(
                customer_id=customer.id, account_id=account.id, date=datetime(2024, 1, 10, tzinfo=UTC)
            )
            february = build_transaction(
                customer_id=customer.id, account_id=account.id, date=datetime(2024, 2, 10, tzinfo=UTC)
            )
            jan_fee = build_commission(transaction_id=january.id)
            feb_fee = build_commission(transaction_id=february.id)
            entities.extend([customer, account, january, february, jan_fee, feb_fee])
            result[name] = dict(customer=customer, account=account, jan_fee=jan_fee, feb_fee=feb_fee,
                                january=january)
        await seed(*entities)
        return result

    return _book


def ids(models):
    return {m.id for m in models}


class TestComissionLookups:
    """Integration tests for single commission lookups"""

    @pytest.mark.asyncio
    async def test_by_id(self, db_session, book):
        """Test lookup by id returns the commission and its transaction"""
        # Arrange
        data = await book()
        fee = data["alice"]["jan_fee"]

        # Act
        response = await make_service(db_session).get_comission_by_id(fee.id)

        # Assert
        assert response.id == fee.id
        assert response.transaction_id == data["alice"]["january"].id

    @pytest.mark.asyncio
    async def test_by_unknown_id(self, db_session):
        """Test unknown commission raises not found"""
        # Arrange
        comission_id = uuid.uuid4()

        # Act
        with pytest.raises(EntityNotFoundException) as exc_info:
            await make_service(db_session).get_comission_by_id(comission_id)

        # Assert
        assert str(exc_info.value) == f"Comission {comission_id} not found"

    @pytest.mark.asyncio
    async def test_by_transaction(self, db_session, book):
        """Test lookup by transaction returns that transaction's commission"""
        # Arrange
        data = await book()

        # Act
        response = await make_service(db_session).get_comission_by_transaction_id(
            data["bob"]["january"].id
        )

        # Assert
        assert response.id == data["bob"]["jan_fee"].id

    @pytest.mark.asyncio
    async def test_by_transaction_without_comission(self, db_session, seed):
        """Test transaction without commission raises not found"""
        # Arrange
        customer = build_customer()
        account = build_account(customer_id=customer.id)
        transaction = build_transaction(customer_id=customer.id, account_id=account.id)
        await seed(customer, account, transaction)

        # Act
        with pytest.raises(EntityNotFoundException) as exc_info:
            await make_service(db_session).get_comission_by_transaction_id(transaction.id)

        # Assert
        assert str(exc_info.value) == f"Comssion with transaction {transaction.id} not found"


class TestComissionFilterDefaultMode:
    """Integration tests for the default (legacy) filter chain"""

    @pytest.mark.asyncio
    async def test_no_filters_returns_everything(self, db_session, book):
        """Test no filters returns every commission"""
        # Arrange
        await book()

        # Act
        response = await make_service(db_session).get_comissions()

        # Assert
        assert len(response) == 4

    @pytest.mark.asyncio
    async def test_customer_only(self, db_session, book):
        """Test customer alone narrows to that customer's commissions"""
        # Arrange
        data = await book()
        alice = data["alice"]

        # Act
        response = await make_service(db_session).get_comissions(customer_id=alice["customer"].id)

        # Assert
        assert ids(response) == {alice["jan_fee"].id, alice["feb_fee"].id}

    @pytest.mark.asyncio
    async def test_customer_and_account_falls_through_to_account(self, db_session, book):
        """Test customer plus account matches on the account only"""
        # Arrange
        data = await book()

        # Act
        response = await make_service(db_session).get_comissions(
            customer_id=data["alice"]["customer"].id,
            account_id=data["bob"]["account"].id,
        )

        # Assert
        assert ids(response) == {data["bob"]["jan_fee"].id, data["bob"]["feb_fee"].id}

    @pytest.mark.asyncio
    async def test_customer_account_and_start_fall_through_to_start(self, db_session, book):
        """Test customer, account and start date match on the start date only"""
        # Arrange
        data = await book()

        # Act
        response = await make_service(db_session).get_comissions(
            customer_id=data["alice"]["customer"].id,
            account_id=data["bob"]["account"].id,
            date_start=FEB_1,
        )

        # Assert
        assert ids(response) == {data["alice"]["feb_fee"].id, data["bob"]["feb_fee"].id}

    @pytest.mark.asyncio
    async def test_customer_and_start_match_either(self, db_session, book):
        """Test customer plus start date unions the customer's and the later commissions"""
        # Arrange
        data = await book()
        alice = data["alice"]

        # Act
        response = await make_service(db_session).get_comissions(
            customer_id=alice["customer"].id,
            date_start=FEB_1,
        )

        # Assert
        assert ids(response) == {alice["jan_fee"].id, alice["feb_fee"].id, data["bob"]["feb_fee"].id}

    @pytest.mark.asyncio
    async def test_every_filter_falls_through_to_end(self, db_session, book):
        """Test with all four filters only the end date decides"""
        # Arrange
        data = await book()

        # Act
        response = await make_service(db_session).get_comissions(
            customer_id=data["alice"]["customer"].id,
            account_id=data["alice"]["account"].id,
            date_start=FEB_1,
            date_end=JAN_31,
        )

        # Assert
        assert ids(response) == {data["alice"]["jan_fee"].id, data["bob"]["jan_fee"].id}

    @pytest.mark.asyncio
    async def test_start_alone_does_not_narrow(self, db_session, book):
        """Test a start date without a customer matches everything"""
        # Arrange
        await book()

        # Act
        response = await make_service(db_session).get_comissions(date_start=FEB_1)

        # Assert
        assert len(response) == 4

    @pytest.mark.asyncio
    async def test_account_and_start_without_customer_do_not_narrow(self, db_session, book):
        """Test account plus start date without a customer matches everything"""
        # Arrange
        data = await book()

        # Act
        response = await make_service(db_session).get_comissions(
            account_id=data["bob"]["account"].id,
            date_start=FEB_1,
        )

        # Assert
        assert len(response) == 4

    @pytest.mark.asyncio
    async def test_date_end_alone_does_not_narrow(self, db_session, book):
        """Test an end date without a customer matches everything"""
        # Arrange
        await book()

        # Act
        response = await make_service(db_session).get_comissions(date_end=JAN_31)

        # Assert
        assert len(response) == 4


class TestComissionFilterStrictMode:
    """Integration tests for strict filtering"""

    @pytest.mark.asyncio
    async def test_no_filters_returns_everything(self, db_session, book):
        """Test no filters returns every commission"""
        # Arrange
        await book()

        # Act
        response = await make_service(db_session, strict_filter=True).get_comissions()

        # Assert
        assert len(response) == 4

    @pytest.mark.asyncio
    async def test_customer_and_account_must_both_match(self, db_session, book):
        """Test mismatched customer and account yield nothing"""
        # Arrange
        data = await book()

        # Act
        response = await make_service(db_session, strict_filter=True).get_comissions(
            customer_id=data["alice"]["customer"].id,
            account_id=data["bob"]["account"].id,
        )

        # Assert
        assert response == []

    @pytest.mark.asyncio
    async def test_customer_within_date_range(self, db_session, book):
        """Test customer and date range are applied together"""
        # Arrange
        data = await book()
        alice = data["alice"]

        # Act
        response = await make_service(db_session, strict_filter=True).get_comissions(
            customer_id=alice["customer"].id,
            date_start=datetime(2024, 1, 1, tzinfo=UTC),
            date_end=JAN_31,
        )

        # Assert
        assert ids(response) == {alice["jan_fee"].id}

    @pytest.mark.asyncio
    async def test_account_and_start(self, db_session, book):
        """Test account and start date are applied together"""
        # Arrange
        data = await book()

        # Act
        response = await make_service(db_session, strict_filter=True).get_comissions(
            account_id=data["bob"]["account"].id,
            date_start=FEB_1,
        )

        # Assert
        assert ids(response) == {data["bob"]["feb_fee"].id}
