from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from retailpos.core.errors import AppError, InternalError
from retailpos.core.logger import logger
from retailpos.utils.tx import unit_of_work
from retailpos.v1_0.schemas import SupplierCreate
from retailpos.v1_0.repositories import SupplierRepository
from retailpos.v1_0.entities import SupplierDTO, SupplierCreatedDTO

class SupplierService:
    def __init__(self, supplier_repository: SupplierRepository) -> None:
        self.supplier_repository = supplier_repository

    async def create(
        self,
        payload: SupplierCreate,
        db: AsyncSession,
    ) -> SupplierCreatedDTO:
        """
        Create a new supplier.

        Args:
            payload: SupplierCreate data with supplier fields.
            db: Active async database session.

        Returns:
            SupplierCreatedDTO with the created supplier.

        Raises:
            InternalError: if creation fails.
        """
        logger.info(
            "[SupplierService] Creating supplier: %s",
            payload.model_dump(),
        )
        try:
            async with unit_of_work(db):
                s = await self.supplier_repository.create_supplier(payload, db)
        except AppError:
            raise
        except Exception as e:
            logger.error(
                "[SupplierService] Create failed: %s",
                e,
                exc_info=True,
            )
            raise InternalError("Failed to create supplier.")

        logger.info(
            "[SupplierService] Supplier created ID=%s",
            s.id,
        )
        return SupplierCreatedDTO(
            message="Supplier created.",
            supplier=SupplierDTO(
                id=s.id,
                trade_name=s.trade_name,
                tax_id=s.tax_id,
                phone=s.phone,
            ),
        )

    async def list_all(
        self,
        db: AsyncSession,
    ) -> List[SupplierDTO]:
        """
        List all suppliers ordered by trade name.
        """
        logger.debug("[SupplierService] List all suppliers")
        async with db.begin():
            rows = await self.supplier_repository.list_suppliers(db)
        return [
            SupplierDTO(
                id=s.id,
                trade_name=s.trade_name,
                tax_id=s.tax_id,
                phone=s.phone,
            )
            for s in rows
        ]
