"""Reference rate endpoints."""

from fastapi import APIRouter

from furnili.web.dependencies import RateProviderDep
from furnili.web.schemas.responses import BoardRateSchema, HardwareRateSchema

router = APIRouter(prefix="/rates", tags=["rates"])


@router.get("/board", response_model=list[BoardRateSchema])
async def list_board_rates(rates: RateProviderDep) -> list[BoardRateSchema]:
    """List active board rates."""
    return [
        BoardRateSchema(
            board_type=rate.board_type,
            thickness=int(rate.thickness),
            finish=rate.finish,
            rate_per_sqft=rate.rate_per_sqft,
            supplier=rate.supplier,
        )
        for rate in rates.board_rates()
    ]


@router.get("/hardware", response_model=list[HardwareRateSchema])
async def list_hardware_rates(rates: RateProviderDep) -> list[HardwareRateSchema]:
    """List active hardware rates."""
    return [
        HardwareRateSchema(
            item_name=rate.item_name,
            category=rate.category,
            current_rate=rate.current_rate,
            unit=rate.unit,
            supplier=rate.supplier,
        )
        for rate in rates.hardware_rates()
    ]
