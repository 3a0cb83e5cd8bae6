from karasu.utils.parallel import process_map


def _square(x: int) -> int:
    return x * x


def test_process_map_serial():
    assert list(process_map(_square, range(5))) == [0, 1, 4, 9, 16]


def test_process_map_parallel_keeps_order():
    assert list(process_map(_square, range(20), n_jobs=2, window=3)) == [x * x for x in range(20)]


def test_process_map_is_lazy():
    calls = []

    def record(x):
        calls.append(x)
        return x

    it = process_map(record, [1, 2, 3])
    assert calls == []
    assert next(it) == 1
    assert calls == [1]


def test_process_map_empty():
    assert list(process_map(_square, [], n_jobs=2)) == []
