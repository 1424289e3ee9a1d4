"""Entity <-> model conversions

One pure function per entity/model pair. None of them touch the
database; relationship collections are read only by the full customer
mapping, which requires them to be loaded already.
"""

from .dtos import (
    AccountModel,
    ComissionModel,
    CustomerCreateDTO,
    CustomerModel,
    FullCustomerModel,
    TransactionModel,
)
from src.domain import Account, Commission, Customer, Transaction


def _enum_value(value):
    return value.value if hasattr(value, "value") else value


def customer_to_model(customer: Customer) -> CustomerModel:
    return CustomerModel(
        id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        email=customer.email,
        phone=customer.phone,
        birth_date=customer.birth_date,
        created_at=customer.created_at,
    )


def customer_to_full_model(customer: Customer) -> FullCustomerModel:
    return FullCustomerModel(
        id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        email=customer.email,
        phone=customer.phone,
        birth_date=customer.birth_date,
        created_at=customer.created_at,
        accounts=[account_to_model(account) for account in customer.accounts],
        transactions=[transaction_to_model(txn) for txn in customer.transactions],
    )


def customer_model_to_entity(model: CustomerCreateDTO) -> Customer:
    return Customer(
        first_name=model.first_name,
        last_name=model.last_name,
        email=model.email,
        phone=model.phone,
        birth_date=model.birth_date,
    )


def account_to_model(account: Account) -> AccountModel:
    return AccountModel(
        id=account.id,
        customer_id=account.customer_id,
        currency=account.currency,
        status=_enum_value(account.status),
        created_at=account.created_at,
    )


def transaction_to_model(transaction: Transaction) -> TransactionModel:
    return TransactionModel(
        id=transaction.id,
        customer_id=transaction.customer_id,
        account_id=transaction.account_id,
        transaction_type=_enum_value(transaction.transaction_type),
        amount=transaction.amount,
        currency=transaction.currency,
        date=transaction.date,
    )


def commission_to_model(commission: Commission) -> ComissionModel:
    return ComissionModel(
        id=commission.id,
        transaction_id=commission.transaction_id,
        amount=commission.amount,
        created_at=commission.created_at,
    )
