# Development server for the ratings application using in-memory storage backend
import os
from ratings_lib.config.settings import resolve_port
from ratings_lib.main import create_app, Config
app = create_app(Config(storage_backend='memory'))
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=resolve_port({}, os.environ))
