#!/usr/bin/env python3
"""
Debts Module

Open/paid tracking of debts and the net balance between what I am owed and
what I owe.
"""

import logging

from ..core.errors import UsageError
from ..core.module import EntityModule
from ..core.money import Money
from .models import Debt, DebtDirection, DebtState

logger = logging.getLogger(__name__)


class DebtsModule(EntityModule[Debt]):
    """Queries and mutations over the debt store."""

    def open_debts(self) -> list[Debt]:
        return [debt for debt in self.store.all() if not debt.is_paid]

    def owed_to_me(self) -> Money:
        """Total of the open debts other people owe me."""
        return self.total(d for d in self.open_debts() if d.direction == DebtDirection.TO)

    def owed_by_me(self) -> Money:
        """Total of the open debts I owe."""
        return self.total(d for d in self.open_debts() if d.direction == DebtDirection.FROM)

    def balance(self) -> Money:
        """Positive when I am owed more than I owe."""
        return self.owed_to_me() - self.owed_by_me()

    def add(self, debt: Debt) -> int:
        if not debt.name.strip():
            raise UsageError("The debt must name the other person")
        debt_id = self.store.add(debt)
        logger.info(f"Created debt {debt_id}: {debt.direction.value} {debt.name} {debt.amount}")
        return debt_id

    def edit(self, debt: Debt) -> bool:
        return self.store.edit(debt)

    def mark_paid(self, debt_id: int) -> None:
        """
        Mark a debt as paid back.

        Raises:
            NotFoundError: If the debt does not exist
            UsageError: If the debt is already paid
        """
        if self.store.get(debt_id).is_paid:
            raise UsageError(f"Debt {debt_id} is already paid")

        def pay(debt: Debt) -> None:
            debt.state = DebtState.PAID

        self.store.update(debt_id, pay)
        logger.info(f"Debt {debt_id} marked as paid")
