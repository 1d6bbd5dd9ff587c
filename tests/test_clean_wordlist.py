from script.clean_wordlist import could_be_answer, unique_preserve_order


def test_could_be_answer():
    assert could_be_answer("robot", 4, 7) is True
    assert could_be_answer("cab", 4, 7) is False
    assert could_be_answer("it's", 4, 7) is False
    assert could_be_answer("abcdefgh", 4, 7) is False   # 8 distinct letters
    assert could_be_answer("Tropicb", 4, 7) is True


def test_unique_preserve_order():
    assert unique_preserve_order(["boot", "robot", "boot"]) == ["boot", "robot"]
