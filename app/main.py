from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.core.exceptions import (
    UnauthorizedException,
    NotFoundException,
    ForbiddenException,
    ValidationException,
    AIServiceException,
)
from app.core.logging import configure_logging
from app.routes import (
    account_product_routes,
    account_routes,
    admin_routes,
    ai_routes,
    auth_routes,
    call_note_routes,
    contact_routes,
    product_routes,
    shipping_location_routes,
)

configure_logging()

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs" if settings.DEBUG else None,  # Disable in production
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
cors_origins = settings.cors_origins_list
if cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# Exception handlers
@app.exception_handler(UnauthorizedException)
async def unauthorized_exception_handler(request: Request, exc: UnauthorizedException):
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


@app.exception_handler(NotFoundException)
async def not_found_exception_handler(request: Request, exc: NotFoundException):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(ForbiddenException)
async def forbidden_exception_handler(request: Request, exc: ForbiddenException):
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": str(exc)})


@app.exception_handler(ValidationException)
async def validation_exception_handler(request: Request, exc: ValidationException):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(AIServiceException)
async def ai_service_exception_handler(request: Request, exc: AIServiceException):
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(exc)})


# Health check endpoint
@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": settings.APP_VERSION}


# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "Territory CRM API",
        "version": settings.APP_VERSION,
        "docs": "/docs" if settings.DEBUG else "Documentation disabled in production",
    }


# Include routers
app.include_router(auth_routes.router, prefix="/api/auth", tags=["Auth"])
app.include_router(admin_routes.router, prefix="/api/admin", tags=["Admin"])
app.include_router(account_routes.router, prefix="/api/accounts", tags=["Accounts"])
app.include_router(contact_routes.account_router, prefix="/api/accounts", tags=["Contacts"])
app.include_router(contact_routes.router, prefix="/api/contacts", tags=["Contacts"])
app.include_router(product_routes.router, prefix="/api/products", tags=["Products"])
app.include_router(account_product_routes.account_router, prefix="/api/accounts", tags=["Account Products"])
app.include_router(account_product_routes.router, prefix="/api/account-products", tags=["Account Products"])
app.include_router(call_note_routes.account_router, prefix="/api/accounts", tags=["Call Notes"])
app.include_router(call_note_routes.router, prefix="/api/call-notes", tags=["Call Notes"])
app.include_router(
    shipping_location_routes.account_router, prefix="/api/accounts", tags=["Shipping Locations"]
)
app.include_router(shipping_location_routes.router, prefix="/api/shipping-locations", tags=["Shipping Locations"])
app.include_router(ai_routes.router, prefix="/api/ai", tags=["AI"])
