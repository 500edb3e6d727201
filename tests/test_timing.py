from ssca2bench.timing import cputime


def test_cputime_is_non_negative():
    assert cputime() >= 0.0


def test_cputime_does_not_go_backwards():
    first = cputime()
    total = sum(i * i for i in range(200_000))
    second = cputime()
    assert total > 0
    assert second >= first


def test_cputime_grows_with_work():
    start = cputime()
    acc = 0
    while cputime() - start <= 0.0:
        acc += sum(range(10_000))
    assert cputime() > start