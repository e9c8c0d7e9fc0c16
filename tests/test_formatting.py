from balance_override.formatting import format_address


def test_format_address():
    assert format_address("0x6B175474E89094C44Da98b954EedeAC495271d0F") == "0x6B17...1d0F"


def test_format_address_rejects_wrong_length():
    assert format_address("0x1234") is None
