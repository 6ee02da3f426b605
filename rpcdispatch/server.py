"""FastAPI server exposing the JSON-RPC dispatcher over HTTP."""
import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from . import __version__
from .calculator import CalculatorAPI
from .config import ServerConfig
from .jsonrpc.dispatcher import JSONRPCServer
from .transport import HTTPTransport

config = ServerConfig.from_env()

logging.basicConfig(level=config.log_level)
logger = logging.getLogger(__name__)

# Initialize components
executor = ThreadPoolExecutor(max_workers=config.max_workers, thread_name_prefix="rpcdispatch")
jsonrpc_server = JSONRPCServer.from_config(config, executor=executor)
http_transport = HTTPTransport(jsonrpc_server)
calculator_api = CalculatorAPI()


def register_jsonrpc_methods():
    """Bind all bundled APIs once."""
    if len(jsonrpc_server.request_json_handler_repository):
        return
    jsonrpc_server.bind_api(calculator_api)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager for FastAPI app."""
    logger.info("Starting JSON-RPC server...")
    register_jsonrpc_methods()
    logger.info(f"Registered {len(jsonrpc_server.request_json_handler_repository)} JSON-RPC methods")
    yield
    logger.info("Shutting down JSON-RPC server...")


app = FastAPI(
    title="rpcdispatch",
    description="JSON-RPC 2.0 dispatch engine over HTTP",
    version=__version__,
    lifespan=lifespan,
)


@app.post("/")
@app.post("/rpc")
@app.post("/jsonrpc")
async def jsonrpc_endpoint(request: Request):
    """JSON-RPC 2.0 endpoint; one message per POST."""
    return await http_transport.handle_post_request(request)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "rpcdispatch",
        "version": __version__,
        "methods": len(jsonrpc_server.request_json_handler_repository),
    }
