from fastapi import Depends
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.repositories import (
    SqlAlchemyAccountRepository,
    SqlAlchemyComissionRepository,
    SqlAlchemyCustomerRepository,
    SqlAlchemyTransactionRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.reporting import ComissionService, CustomerService, TransactionService
import src.domain  # noqa: F401  registers all tables on SQLModel.metadata

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_customer_service(
    session: AsyncSession = Depends(get_session),
) -> CustomerService:
    return CustomerService(
        uow=SqlAlchemyUnitOfWork(session),
        customer_repo=SqlAlchemyCustomerRepository(session),
        account_repo=SqlAlchemyAccountRepository(session),
        transaction_repo=SqlAlchemyTransactionRepository(session),
    )


def get_transaction_service(
    session: AsyncSession = Depends(get_session),
) -> TransactionService:
    return TransactionService(
        customer_repo=SqlAlchemyCustomerRepository(session),
        transaction_repo=SqlAlchemyTransactionRepository(session),
    )


def get_comission_service(
    session: AsyncSession = Depends(get_session),
) -> ComissionService:
    return ComissionService(
        transaction_repo=SqlAlchemyTransactionRepository(session),
        comission_repo=SqlAlchemyComissionRepository(session),
        strict_filter=str(ApplicationConfig.COMMISSION_FILTER_MODE).strip().lower() == "strict",
    )
