"""
Run the web server.

    python -m bank_app
"""

import uvicorn

from bank_app.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "bank_app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
