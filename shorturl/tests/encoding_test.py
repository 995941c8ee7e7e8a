from shorturl.utils.encoding import ALPHABET, generate_short_code, is_valid_short_code


def test_generate_short_code_default_length():
    code = generate_short_code()
    assert len(code) == 7
    assert all(ch in ALPHABET for ch in code)


def test_generate_short_code_custom_length():
    assert len(generate_short_code(10)) == 10


def test_generate_short_code_is_random():
    codes = {generate_short_code() for _ in range(200)}
    assert len(codes) > 190


def test_is_valid_short_code():
    assert is_valid_short_code("aZ09xYq")
    assert not is_valid_short_code("abc")
    assert not is_valid_short_code("abc-def")
    assert not is_valid_short_code("a" * 17)
    assert not is_valid_short_code("favicon.ico")
