import os
from dotenv import load_dotenv

# Загружаем переменные окружения (.env необязателен)
load_dotenv()

# База данных основного сервиса и облегчённой версии
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./users.db")
LITE_DATABASE_URL = os.getenv("LITE_DATABASE_URL", "sqlite:///./users_lite.db")

# Пагинация
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", "100"))
# Смещение (page-1)*pageSize должно помещаться в INTEGER SQLite
MAX_PAGE = (2**63 - 1) // MAX_PAGE_SIZE

# Администратор по умолчанию (создаётся при первом запуске)
ADMIN_GROUP_NAME = "Admin"
USER_GROUP_NAME = "User"
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin1")
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@example.com")

# Сервер
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8855"))
