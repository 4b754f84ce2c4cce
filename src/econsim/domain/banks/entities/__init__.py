from econsim.domain.banks.entities.bank import Bank

__all__ = ["Bank"]
