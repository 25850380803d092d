import io

import pytest

from purrmart import art


def test_clear_terminal_writes_sequence_to_given_file():
    buf = io.StringIO()
    art.clear_terminal(buf)
    assert buf.getvalue() == art.CLEAR_SEQUENCE


def test_display_without_clear_writes_text_only():
    buf = io.StringIO()
    art.display("hello\n", clear=False, file=buf)
    assert buf.getvalue() == "hello\n"


def test_display_with_clear_prefixes_sequence():
    buf = io.StringIO()
    art.display("hello\n", clear=True, file=buf)
    assert buf.getvalue() == art.CLEAR_SEQUENCE + "hello\n"


def test_welcome_message_clears_and_greets(capsys):
    art.welcome_message()
    out = capsys.readouterr().out
    assert out.startswith(art.CLEAR_SEQUENCE)
    assert "Welcome to Purrmart" in out
    assert "--------Kelompok 3 K1---------" in out


def test_welcome_menu_list_entries(capsys):
    art.welcome_menu_list()
    out = capsys.readouterr().out
    assert "WELCOME MENU" in out
    for entry in (" 1. START", " 2. LOAD <filename>", " 3. EXIT", " 4. HELP"):
        assert entry in out.splitlines()
    assert art.CLEAR_SEQUENCE not in out


def test_login_menu_list_entries(capsys):
    art.login_menu_list()
    lines = capsys.readouterr().out.splitlines()
    assert " 1. REGISTER" in lines
    assert " 5. HELP" in lines


def test_main_menu_list_has_all_numbered_commands(capsys):
    art.main_menu_list()
    lines = capsys.readouterr().out.splitlines()
    numbered = [line for line in lines if line[:2].strip().isdigit()]
    assert len(numbered) == 22
    assert "22. BIOWEAPON" in lines
    assert " >>> PROFILE" in lines


@pytest.mark.parametrize(
    "func, title",
    [
        (art.welcome_help_menu, "=====[ Welcome Help Menu PURRMART ]====="),
        (art.login_help_menu, "=====[ Login Help Menu PURRMART ]====="),
        (art.main_help_menu, "=====[ Main Help Menu PURRMART ]====="),
    ],
)
def test_help_menus_start_with_help_banner(capsys, func, title):
    art.art_help()
    banner = capsys.readouterr().out
    func()
    out = capsys.readouterr().out
    assert out.startswith(banner)
    assert title in out


def test_main_help_lists_save_command(capsys):
    art.main_help_menu()
    out = capsys.readouterr().out
    assert "SAVE <filename> -> Untuk menyimpan data program ke file" in out


def test_work_challenge_list_costs(capsys):
    art.work_challenge_list()
    out = capsys.readouterr().out
    assert out.startswith(art.CLEAR_SEQUENCE)
    assert " 1. TEBAK ANGKA (PLAYING COST = 200)" in out
    assert " 2. W0RDL3 (PLAYING COST = 500)" in out
    assert " 3. QUANTUM W0RDL3 (PLAYING COST = 750)" in out


def test_thank_you_letter_clears(capsys):
    art.thank_you_letter()
    out = capsys.readouterr().out
    assert out.startswith(art.CLEAR_SEQUENCE)
    assert "|_|   |_|  |_|/_/    \\_\\|_| \\_||_|\\_\\" in out


@pytest.mark.parametrize(
    "func",
    [
        art.art_register,
        art.art_login,
        art.art_tebak,
        art.art_bio,
        art.art_wordl,
        art.art_work,
        art.art_store_list,
        art.art_store_remove,
        art.art_store_supply,
        art.art_store_request,
    ],
)
def test_banners_do_not_clear_and_end_with_blank_line(capsys, func):
    func()
    out = capsys.readouterr().out
    assert art.CLEAR_SEQUENCE not in out
    assert out.endswith("\n\n")
    assert len(out.splitlines()) == 8


def test_banners_are_distinct(capsys):
    outputs = []
    for func in (art.art_store_list, art.art_store_remove, art.art_store_supply, art.art_store_request):
        func()
        outputs.append(capsys.readouterr().out)
    assert len(set(outputs)) == 4


def test_login_banner_first_line(capsys):
    art.art_login()
    first = capsys.readouterr().out.splitlines()[0]
    assert first == " __        ______     _______  __  .__   __. "