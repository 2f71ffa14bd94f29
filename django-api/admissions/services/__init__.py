from admissions.services.catalog_service import CatalogService
from admissions.services.issuance_service import IssuanceService
from admissions.services.redemption_service import RedemptionService

__all__ = ["CatalogService", "IssuanceService", "RedemptionService"]
