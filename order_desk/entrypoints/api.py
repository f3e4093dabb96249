"""FastAPI routes translating HTTP requests into OrderService calls."""

import time

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from order_desk.domain.errors import (
    InvalidArgumentError,
    OrdersNotFoundError,
    OrderValidationError,
    StoreError,
)
from order_desk.domain.interfaces import IOrderService
from order_desk.domain.order import Order, OrderSubmission

router = APIRouter(prefix="/orders", tags=["orders"])


def get_order_service(request: Request) -> IOrderService:
    return request.app.state.order_service


@router.get("/recent", response_model=list[Order])
def get_recent_orders(service: IOrderService = Depends(get_order_service)):
    try:
        return service.list_recent()
    except OrdersNotFoundError:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "No recent orders found")
    except StoreError:
        raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


@router.post("", response_model=Order, status_code=status.HTTP_201_CREATED)
def submit_order(
    submission: OrderSubmission,
    service: IOrderService = Depends(get_order_service),
):
    try:
        return service.submit(submission)
    except StoreError:
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An error occurred while submitting the order.",
        )


@router.get("/afterdays/{days}", response_model=list[Order])
def get_orders_after_days(
    days: int, service: IOrderService = Depends(get_order_service)
):
    try:
        return service.list_after_business_days(days)
    except InvalidArgumentError:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "Days must be a non-negative number."
        )
    except StoreError:
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An error occurred while getting orders.",
        )


async def _order_validation_handler(
    request: Request, exc: OrderValidationError
) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": exc.errors})


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        # Drop the "body"/"path" prefix so fields read the same as service errors
        loc = [str(part) for part in error["loc"][1:]] or [str(error["loc"][0])]
        errors.setdefault(".".join(loc), []).append(error["msg"])
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(
        f"[API] Unhandled error on {request.method} {request.url.path}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(service: IOrderService) -> FastAPI:
    """Build the FastAPI application around ``service``."""
    app = FastAPI(title="Order Desk", version="1.0.0")
    app.state.order_service = service

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.info(
                f"[API] {request.method} {request.url.path} -> "
                f"{status_code} ({duration_ms:.1f} ms)"
            )

    app.add_exception_handler(OrderValidationError, _order_validation_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
    app.include_router(router)
    return app
