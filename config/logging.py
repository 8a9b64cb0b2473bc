import logging
import os

from config.env import settings

# Đảm bảo thư mục log tồn tại
os.makedirs(settings.LOG_DIR, exist_ok=True)

# Cấu hình logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(message)s",
    handlers=[
        # logging.StreamHandler(),                        # in ra stdout
        logging.FileHandler(os.path.join(settings.LOG_DIR, "log.txt"), encoding="utf-8")  # ghi log vào file
    ]
)

logger = logging.getLogger("clean_code_assistant")
