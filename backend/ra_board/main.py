import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ra_board.config import settings
from ra_board.errors import BoardError
from ra_board.routers import applications, postings, users
from ra_board.services.board_store import board_store
from ra_board.services.demo_data import seed_demo_board

logger = logging.getLogger("ra_board")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(settings.log_level.upper())
    if settings.seed_demo_data:
        seed_demo_board(board_store)
        logger.info(
            "Seeded demo board: %d users, %d postings, %d applications.",
            len(board_store.users), len(board_store.postings), len(board_store.applications),
        )
    yield
    board_store.reset()


app = FastAPI(
    title="RA Board",
    description="Research-assistant job board: search, apply, review",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    # Local front-end dev server only.
    allow_origins=[
        "http://127.0.0.1:5173",
        "http://localhost:5173",
    ],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BoardError)
async def board_error_handler(request: Request, exc: BoardError):
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


app.include_router(postings.router, prefix=settings.api_prefix)
app.include_router(applications.router, prefix=settings.api_prefix)
app.include_router(users.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}
