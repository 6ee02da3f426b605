"""Unit tests for the disposable function repository."""
from concurrent.futures import ThreadPoolExecutor

from rpcdispatch.binding import DisposableFunctionRepository
from rpcdispatch.jsonrpc.dispatcher import JSONRPCServer


def test_add_and_get():
    repository = DisposableFunctionRepository()

    key = repository.add(len)

    assert repository.get(key) is len
    assert len(repository) == 1


def test_dispose_removes_function():
    repository = DisposableFunctionRepository()
    key = repository.add(len)

    assert repository.dispose(key) is True
    assert repository.get(key) is None
    assert repository.dispose(key) is False
    assert len(repository) == 0


def test_keys_are_unique():
    repository = DisposableFunctionRepository()
    callback = lambda: None  # noqa: E731

    with ThreadPoolExecutor(max_workers=4) as pool:
        keys = list(pool.map(lambda _: repository.add(callback), range(200)))

    assert len(set(keys)) == 200
    assert len(repository) == 200


def test_server_owns_a_repository():
    server = JSONRPCServer()
    assert isinstance(server.disposable_function_repository, DisposableFunctionRepository)
