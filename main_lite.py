import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from userdir.core.config import CORS_ORIGINS, HOST, LOG_LEVEL, PORT
from userdir.core.errors import DirectoryError, directory_error_handler
from userdir.lite.api import router as users_router
from userdir.lite.db import init_db

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title="User Directory (lite)", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(DirectoryError, directory_error_handler)

app.include_router(users_router, prefix="/api/users", tags=["Пользователи"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main_lite:app", host=HOST, port=PORT, reload=True)
