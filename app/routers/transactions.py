from typing import Optional, Union, List
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.dependencies import get_transaction_repo, get_metrics_port, get_logging_port
from app.schemas.transaction_schema import (
    TransactionPageResponse,
    StatisticsResponse,
    PriceRangeResponse,
    CategoryCountResponse,
    CombinedDataResponse,
    ErrorResponse,
)
from application.service.list_transactions import ListTransactionsService
from application.service.get_statistics import GetStatisticsService
from application.service.get_bar_chart import GetBarChartService
from application.service.get_pie_chart import GetPieChartService
from application.service.get_combined_data import GetCombinedDataService
from domain.exceptions import InvalidMonthError, INVALID_MONTH_MESSAGE
from domain.interfaces import TransactionRepository, MetricsPort, LoggingPort

router = APIRouter()

_month_errors = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def invalid_month_response() -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_MONTH_MESSAGE)


@router.get(
    "/transactions",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def list_transactions(
    search: str = "",
    page: Optional[str] = None,
    per_page: Optional[str] = None,
    repo: TransactionRepository = Depends(get_transaction_repo),
    metrics: MetricsPort = Depends(get_metrics_port),
    logging_port: LoggingPort = Depends(get_logging_port),
) -> Union[TransactionPageResponse, ErrorResponse]:
    """
    List transactions, optionally searched, one page at a time.

    `search` matches title and description (case-insensitive) and the price.
    `page` and `per_page` default to 1 and 10 when missing or not positive integers.
    """
    srv = ListTransactionsService(repo, metrics_port=metrics, logging_port=logging_port)
    try:
        result = await srv.execute(search=search, page=page, per_page=per_page)
        return TransactionPageResponse.from_entity(result)
    except Exception:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch transactions")


@router.get("/statistics", responses=_month_errors)
async def statistics(
    month: str = "",
    repo: TransactionRepository = Depends(get_transaction_repo),
    metrics: MetricsPort = Depends(get_metrics_port),
    logging_port: LoggingPort = Depends(get_logging_port),
) -> Union[StatisticsResponse, ErrorResponse]:
    """
    Total sale amount, sold and not sold item counts for a month (e.g. `?month=March`).
    """
    srv = GetStatisticsService(repo, metrics_port=metrics, logging_port=logging_port)
    try:
        result = await srv.execute(month)
        return StatisticsResponse.from_entity(result)
    except InvalidMonthError:
        return invalid_month_response()
    except Exception:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch statistics")


@router.get("/bar-chart", responses=_month_errors)
async def bar_chart(
    month: str = "",
    repo: TransactionRepository = Depends(get_transaction_repo),
    metrics: MetricsPort = Depends(get_metrics_port),
    logging_port: LoggingPort = Depends(get_logging_port),
) -> Union[List[PriceRangeResponse], ErrorResponse]:
    """
    Item counts for ten price ranges (0-100 ... 901-above) within a month.
    """
    srv = GetBarChartService(repo, metrics_port=metrics, logging_port=logging_port)
    try:
        result = await srv.execute(month)
        return [PriceRangeResponse.from_entity(bucket) for bucket in result]
    except InvalidMonthError:
        return invalid_month_response()
    except Exception:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch bar chart data")


@router.get("/pie-chart", responses=_month_errors)
async def pie_chart(
    month: str = "",
    repo: TransactionRepository = Depends(get_transaction_repo),
    metrics: MetricsPort = Depends(get_metrics_port),
    logging_port: LoggingPort = Depends(get_logging_port),
) -> Union[List[CategoryCountResponse], ErrorResponse]:
    """
    Item counts per category present in a month.
    """
    srv = GetPieChartService(repo, metrics_port=metrics, logging_port=logging_port)
    try:
        result = await srv.execute(month)
        return [CategoryCountResponse.from_entity(group) for group in result]
    except InvalidMonthError:
        return invalid_month_response()
    except Exception:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch pie chart data")


@router.get("/combined-data", responses=_month_errors)
async def combined_data(
    month: str = "",
    page: Optional[str] = None,
    per_page: Optional[str] = None,
    repo: TransactionRepository = Depends(get_transaction_repo),
    metrics: MetricsPort = Depends(get_metrics_port),
    logging_port: LoggingPort = Depends(get_logging_port),
) -> Union[CombinedDataResponse, ErrorResponse]:
    """
    One call for the dashboard: a page of the month's transactions, its
    statistics, bar chart and pie chart data.
    """
    srv = GetCombinedDataService(repo, metrics_port=metrics, logging_port=logging_port)
    try:
        result = await srv.execute(month, page=page, per_page=per_page)
        return CombinedDataResponse.from_entity(result)
    except InvalidMonthError:
        return invalid_month_response()
    except Exception:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch combined data")
