"""Reporting domain services"""
from .dtos import (
    ReportingDTO,
    CustomerCreateDTO,
    CustomerModel,
    FullCustomerModel,
    AccountModel,
    TransactionModel,
    ComissionModel,
    TransactionSearchFilter,
)
from .mappings import (
    customer_to_model,
    customer_to_full_model,
    customer_model_to_entity,
    account_to_model,
    transaction_to_model,
    commission_to_model,
)
from .customer_service import CustomerService
from .transaction_service import TransactionService
from .comission_service import ComissionService

__all__ = [
    "CustomerService",
    "TransactionService",
    "ComissionService",
    "ReportingDTO",
    "CustomerCreateDTO",
    "CustomerModel",
    "FullCustomerModel",
    "AccountModel",
    "TransactionModel",
    "ComissionModel",
    "TransactionSearchFilter",
    "customer_to_model",
    "customer_to_full_model",
    "customer_model_to_entity",
    "account_to_model",
    "transaction_to_model",
    "commission_to_model",
]
