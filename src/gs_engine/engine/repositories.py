"""Repository bundle handed to the ConsistencyEngine and the report service.

Both backends satisfy the same Protocols, so the engine never knows which
one it is talking to.
"""

from dataclasses import dataclass

from src.gs_catalog.domain.repository import GameRepositoryProtocol
from src.gs_catalog.infrastructure.memory import MemoryGameRepository
from src.gs_catalog.infrastructure.persistence import GameRepository
from src.gs_inventory.domain.repository import StockRepositoryProtocol
from src.gs_inventory.infrastructure.memory import MemoryStockRepository
from src.gs_inventory.infrastructure.persistence import StockRepository
from src.gs_order.domain.repository import OrderRepositoryProtocol
from src.gs_order.infrastructure.memory import MemoryOrderRepository
from src.gs_order.infrastructure.persistence import OrderRepository
from src.gs_payment.domain.repository import PaymentRepositoryProtocol
from src.gs_payment.infrastructure.memory import MemoryPaymentRepository
from src.gs_payment.infrastructure.persistence import PaymentRepository
from src.gs_user.domain.repository import UserRepositoryProtocol
from src.gs_user.infrastructure.memory import MemoryUserRepository
from src.gs_user.infrastructure.persistence import UserRepository


@dataclass
class Repositories:
    users: UserRepositoryProtocol
    games: GameRepositoryProtocol
    stock: StockRepositoryProtocol
    orders: OrderRepositoryProtocol
    payments: PaymentRepositoryProtocol


def sql_repositories() -> Repositories:
    return Repositories(
        users=UserRepository(),
        games=GameRepository(),
        stock=StockRepository(),
        orders=OrderRepository(),
        payments=PaymentRepository(),
    )


def memory_repositories() -> Repositories:
    return Repositories(
        users=MemoryUserRepository(),
        games=MemoryGameRepository(),
        stock=MemoryStockRepository(),
        orders=MemoryOrderRepository(),
        payments=MemoryPaymentRepository(),
    )
