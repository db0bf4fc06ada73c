import uvicorn

from leakchecker import config

if __name__ == "__main__":
    uvicorn.run("leakchecker.main:app", host=config.HOST, port=config.PORT)
