import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from userdir.api.users import router as users_router
from userdir.api.groups import router as groups_router
from userdir.api.auth import router as auth_router
from userdir.core.config import CORS_ORIGINS, HOST, LOG_LEVEL, PORT
from userdir.core.db import SessionLocal, init_db
from userdir.core.errors import DirectoryError, directory_error_handler
from userdir.core.seed import seed

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Таблицы и базовые данные готовы до приёма запросов
    init_db()
    with SessionLocal() as db:
        seed(db)
    logger.info("🚀 Справочник пользователей запущен")
    yield


app = FastAPI(title="User Directory", lifespan=lifespan)

# Добавляем CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(DirectoryError, directory_error_handler)

# Подключаем API-маршруты
app.include_router(users_router, prefix="/api/users", tags=["Пользователи"])
app.include_router(groups_router, prefix="/api/groups", tags=["Группы"])
app.include_router(auth_router, prefix="/api", tags=["Авторизация"])

@app.get("/health")
def health():
    return {"status": "ok"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=HOST, port=PORT, reload=True)
