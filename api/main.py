from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from core import db
from customers import repository as customers_repository
from customers import router as customers_router

@asynccontextmanager
async def lifespan(_: FastAPI):
    # Open the shared DB handle once per process, before serving requests.
    await db.init_pool()
    try:
        await customers_repository.ensure_schema()
        db.start_keepalive()
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

# Any origin may call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(customers_router.router, tags=["customers"])


@app.exception_handler(db.DatabaseError)
async def database_error_handler(_: Request, exc: db.DatabaseError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=500)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
