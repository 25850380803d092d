"""Banners, menus and help screens shown by the shop's text interface."""

from __future__ import annotations

import sys
from typing import TextIO

CLEAR_SEQUENCE = "\x1b[2J\x1b[H"

_WELCOME = (
    " .+\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+. \n"
    "(                                                                                 )\n"
    " )      __    __       _                                    _                    ( \n"
    "(      / / /\\ \\ \\ ___ | |  ___  ___   _ __ ___    ___      | |_  ___              )\n"
    " )     \\ \\/  \\/ // _ \\| | / __|/ _ \\ | '_ ` _ \\  / _ \\     | __|/ _ \\            ( \n"
    "(       \\  /\\  /|  __/| || (__| (_) || | | | | ||  __/     | |_| (_) |            )\n"
    " )       \\/  \\/  \\___||_| \\___|\\___/ |_| |_| |_| \\___|      \\__|\\___/            ( \n"
    "(                                                                                 )\n"
    " )        ___                                             _                      ( \n"
    "(        / _ \\ _   _  _ __  _ __  _ __ ___    __ _  _ __ | |_                     )\n"
    " )      / /_)/| | | || '__|| '__|| '_ ` _ \\  / _` || '__|| __|                   ( \n"
    "(      / ___/ | |_| || |   | |   | | | | | || (_| || |   | |_                     )\n"
    " )     \\/      \\__,_||_|   |_|   |_| |_| |_| \\__,_||_|    \\__|                   ( \n"
    "(                                                                                 )\n"
    " )                                                                               ( \n"
    "(                                                                                 )\n"
    " \"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+.\"+. \"  \n\n"
    "--------Kelompok 3 K1---------                                                 \n"
    "       Welcome to Purrmart                                                      \n"
)

_THANK_YOU = (
    "  _______  _    _            _   _  _  __ __     __ ____   _    _                       \n"
    " |__   __|| |  | |    /\\    | \\ | || |/ / \\ \\   / // __ \\ | |  | |                      \n"
    "    | |   | |__| |   /  \\   |  \\| || ' /   \\ \\_/ /| |  | || |  | |                      \n"
    "    | |   |  __  |  / /\\ \\  | . ` ||  <     \\   / | |  | || |  | |                      \n"
    "    | |   | |  | | / ____ \\ | |\\  || . \\     | |  | |__| || |__| |                      \n"
    "    |_|   |_|  |_|/_/    \\_\\|_| \\_||_|\\_\\    |_|   \\____/  \\____/                       \n"
    "                                                                                        \n"
    "                                                                                        \n"
    "  ______  ____   _____      _____  _    _   ____    ____    _____  _____  _   _   _____ \n"
    " |  ____|/ __ \\ |  __ \\    / ____|| |  | | / __ \\  / __ \\  / ____||_   _|| \\ | | / ____|\n"
    " | |__  | |  | || |__) |  | |     | |__| || |  | || |  | || (___    | |  |  \\| || |  __ \n"
    " |  __| | |  | ||  _  /   | |     |  __  || |  | || |  | | \\___ \\   | |  | . ` || | |_ |\n"
    " | |    | |__| || | \\ \\   | |____ | |  | || |__| || |__| | ____) | _| |_ | |\\  || |__| |\n"
    " |_|     \\____/ |_|  \\_\\   \\_____||_|  |_| \\____/  \\____/ |_____/ |_____||_| \\_| \\_____|\n"
    "                                                                                        \n"
    "                                                                                        \n"
    "  _____   _    _  _____   _____   __  __            _____  _______                      \n"
    " |  __ \\ | |  | ||  __ \\ |  __ \\ |  \\/  |    /\\    |  __ \\|__   __|                     \n"
    " | |__) || |  | || |__) || |__) || \\  / |   /  \\   | |__) |  | |                        \n"
    " |  ___/ | |  | ||  _  / |  _  / | |\\/| |  / /\\ \\  |  _  /   | |                        \n"
    " | |     | |__| || | \\ \\ | | \\ \\ | |  | | / ____ \\ | | \\ \\   | |                        \n"
    " |_|      \\____/ |_|  \\_\\|_|  \\_\\|_|  |_|/_/    \\_\\|_|  \\_\\  |_|                        \n"
    "                                                                                        \n"
    "                                                                                        \n"
)

_HELP = (
    " __    __   _______  __      .______   \n"
    "|  |  |  | |   ____||  |     |   _  \\  \n"
    "|  |__|  | |  |__   |  |     |  |_)  | \n"
    "|   __   | |   __|  |  |     |   ___/  \n"
    "|  |  |  | |  |____ |  `----.|  |      \n"
    "|__|  |__| |_______||_______|| _|      \n"
    "                                        \n"
    "\n"
)

_REGISTER = (
    ".______       _______   _______  __       _______.___________. _______ .______      \n"
    "|   _  \\     |   ____| /  _____||  |     /       |           ||   ____||   _  \\     \n"
    "|  |_)  |    |  |__   |  |  __  |  |    |   (----`---|  |----`|  |__   |  |_)  |    \n"
    "|      /     |   __|  |  | |_ | |  |     \\   \\       |  |     |   __|  |      /     \n"
    "|  |\\  \\----.|  |____ |  |__| | |  | .----)   |      |  |     |  |____ |  |\\  \\----.\n"
    "| _| `._____||_______| \\______| |__| |_______/       |__|     |_______|| _| `._____| \n"
    "                                                                                     \n"
    "\n"
)

_LOGIN = (
    " __        ______     _______  __  .__   __. \n"
    "|  |      /  __  \\   /  _____||  | |  \\ |  | \n"
    "|  |     |  |  |  | |  |  __  |  | |   \\|  | \n"
    "|  |     |  |  |  | |  | |_ | |  | |  . `  | \n"
    "|  `----.|  `--'  | |  |__| | |  | |  |\\   | \n"
    "|_______| \\______/   \\______| |__| |__| \\__| \n"
    "                                             \n"
    "\n"
)

_WELCOME_MENU = (
    "\n=========================================\n"
    "               WELCOME MENU                \n"
    "=========================================\n"
    " 1. START\n"
    " 2. LOAD <filename>\n"
    " 3. EXIT\n"
    " 4. HELP\n"
    "=========================================\n"
)

_WELCOME_HELP = (
    "\n"
    "=====[ Welcome Help Menu PURRMART ]=====\n"
    "START -> Untuk masuk sesi baru\n"
    "LOAD -> Untuk memulai sesi berdasarkan file konfigurasi\n"
    "EXIT -> Untuk keluar dari program\n\n"
)

_LOGIN_HELP = (
    "\n"
    "=====[ Login Help Menu PURRMART ]=====\n"
    "REGISTER -> Untuk melakukan pendaftaran akun baru\n"
    "LOGIN -> Untuk masuk ke dalam akun dan memulai sesi\n"
    "LOGOUT -> Untuk keluar dari sesi\n"
    "EXIT -> Untuk keluar dari program\n\n"
)

_LOGIN_MENU = (
    "\n=========================================\n"
    "               LOGIN MENU                \n"
    "=========================================\n"
    " 1. REGISTER\n"
    " 2. LOGIN\n"
    " 3. LOGOUT\n"
    " 4. EXIT\n"
    " 5. HELP\n"
    "=========================================\n"
)

_MAIN_HELP = (
    "\n"
    "=====[ Main Help Menu PURRMART ]=====\n"
    "PROFILE -> Untuk melihat profil pengguna yang sedang login\n"
    "WORK -> Untuk bekerja dan mendapatkan penghasilan\n"
    "WORK CHALLENGE -> Untuk mengerjakan challenge khusus\n"
    "STORE LIST -> Untuk melihat daftar barang di toko\n"
    "STORE REQUEST -> Untuk meminta penambahan barang di toko\n"
    "STORE SUPPLY -> Untuk menambahkan barang dari permintaan ke toko\n"
    "STORE REMOVE -> Untuk menghapus barang dari toko\n"
    "CART ADD <nama> <jumlah> -> Untuk menambahkan barang ke keranjang belanja\n"
    "CART REMOVE <nama> <jumlah> -> Untuk menghapus barang dari keranjang belanja\n"
    "CART SHOW -> Untuk melihat isi keranjang belanja\n"
    "CART PAY -> Untuk membayar isi keranjang belanja\n"
    "HISTORY <jumlah> -> Untuk melihat riwayat pembelian pengguna\n"
    "WISHLIST ADD -> Untuk menambahkan barang ke wishlist\n"
    "WISHLIST SWAP <i> <j> -> Untuk menukar posisi wishlist ke-i dan ke-j\n"
    "WISHLIST REMOVE <i> -> Untuk menghapus wishlist posisi ke-i\n"
    "WISHLIST REMOVE -> Untuk menghapus wishlist berdasarkan nama\n"
    "WISHLIST CLEAR -> Untuk menghapus seluruh wishlist\n"
    "WISHLIST SHOW -> Untuk melihat wishlist saat ini\n"
    "LOGOUT -> Untuk keluar dari sesi pengguna saat ini\n"
    "SAVE <filename> -> Untuk menyimpan data program ke file\n"
    "EXIT -> Untuk keluar dari aplikasi\n"
    "HELP -> Untuk menampilkan panduan menu ini\n"
    "BIOWEAPON -> Untuk membuat senjata biologis rahasia\n"
)

_MAIN_MENU = (
    "\n=========================================\n"
    "               MAIN MENU                 \n"
    "=========================================\n"
    " >>> PROFILE\n"
    " 1. WORK\n"
    " 2. WORK CHALLENGE\n"
    " 3. STORE LIST\n"
    " 4. STORE REQUEST\n"
    " 5. STORE SUPPLY\n"
    " 6. STORE REMOVE\n"
    " 7. CART ADD <nama barang> <jumlah>\n"
    " 8. CART REMOVE <nama barang> <jumlah>\n"
    " 9. CART SHOW\n"
    "10. CART PAY\n"
    "11. HISTORY <jumlah>\n"
    "12. WISHLIST ADD\n"
    "13. WISHLIST SWAP <i> <j>\n"
    "14. WISHLIST REMOVE <i>\n"
    "15. WISHLIST REMOVE\n"
    "16. WISHLIST CLEAR\n"
    "17. WISHLIST SHOW\n"
    "18. LOGOUT\n"
    "19. SAVE <filename>\n"
    "20. EXIT\n"
    "21. HELP\n"
    "22. BIOWEAPON\n"
    "<<< BACK \n"
    "=========================================\n"
)

_WORK_CHALLENGE = (
    "____    __    ____  ______   .______       __  ___      ______  __    __       ___       __       __       _______ .__   __.   _______  _______ \n"
    "\\   \\  /  \\  /   / /  __  \\  |   _  \\     |  |/  /     /      ||  |  |  |     /   \\     |  |     |  |     |   ____||  \\ |  |  /  _____||   ____|\n"
    " \\   \\/    \\/   / |  |  |  | |  |_)  |    |  '  /     |  ,----'|  |__|  |    /  ^  \\    |  |     |  |     |  |__   |   \\|  | |  |  __  |  |__   \n"
    "  \\            /  |  |  |  | |      /     |    <      |  |     |   __   |   /  /_\\  \\   |  |     |  |     |   __|  |  . `  | |  | |_ | |   __|  \n"
    "   \\    /\\    /   |  `--'  | |  |\\  \\----.|  .  \\     |  `----.|  |  |  |  /  _____  \\  |  `----.|  `----.|  |____ |  |\\   | |  |__| | |  |____ \n"
    "    \\__/  \\__/     \\______/  | _| `._____||__|\\__\\     \\______||__|  |__| /__/     \\__\\ |_______||_______||_______||__| \\__|  \\______| |_______|\n"
    "                                                                                                                                                 \n"
    "\n=========================================\n"
    "           WORK CHALLENGE LIST            \n"
    "=========================================\n"
    " 1. TEBAK ANGKA (PLAYING COST = 200)\n"
    " 2. W0RDL3 (PLAYING COST = 500)\n"
    " 3. QUANTUM W0RDL3 (PLAYING COST = 750)\n"
    "<<< KELUAR\n"
    "=========================================\n"
)

_TEBAK = (
    ".___________. _______ .______        ___       __  ___         ___      .__   __.   _______  __  ___      ___      \n"
    "|           ||   ____||   _  \\      /   \\     |  |/  /        /   \\     |  \\ |  |  /  _____||  |/  /     /   \\     \n"
    "`---|  |----`|  |__   |  |_)  |    /  ^  \\    |  '  /        /  ^  \\    |   \\|  | |  |  __  |  '  /     /  ^  \\    \n"
    "    |  |     |   __|  |   _  <    /  /_\\  \\   |    <        /  /_\\  \\   |  . `  | |  | |_ | |    <     /  /_\\  \\   \n"
    "    |  |     |  |____ |  |_)  |  /  _____  \\  |  .  \\      /  _____  \\  |  |\\   | |  |__| | |  .  \\   /  _____  \\  \n"
    "    |__|     |_______||______/  /__/     \\__\\ |__|\\__\\    /__/     \\__\\ |__| \\__|  \\______| |__|\\__\\ /__/     \\__\\ \n"
    "                                                                                                                   \n"
    "\n"
)

_BIO = (
    ".______    __    ______   ____    __    ____  _______     ___      .______     ______   .__   __. \n"
    "|   _  \\  |  |  /  __  \\  \\   \\  /  \\  /   / |   ____|   /   \\     |   _  \\   /  __  \\  |  \\ |  | \n"
    "|  |_)  | |  | |  |  |  |  \\   \\/    \\/   /  |  |__     /  ^  \\    |  |_)  | |  |  |  | |   \\|  | \n"
    "|   _  <  |  | |  |  |  |   \\            /   |   __|   /  /_\\  \\   |   ___/  |  |  |  | |  . `  | \n"
    "|  |_)  | |  | |  `--'  |    \\    /\\    /    |  |____ /  _____  \\  |  |      |  `--'  | |  |\\   | \n"
    "|______/  |__|  \\______/      \\__/  \\__/     |_______/__/     \\__\\ | _|       \\______/  |__| \\__| \n"
    "                                                                                                   \n"
    "\n"
)

_WORDL = (
    "____    __    ____  ___   .______       _______   __       ____   \n"
    "\\   \\  /  \\  /   / / _ \\  |   _  \\     |       \\ |  |     |___ \\  \n"
    " \\   \\/    \\/   / | | | | |  |_)  |    |  .--.  ||  |       __) | \n"
    "  \\            /  | | | | |      /     |  |  |  ||  |      |__ <  \n"
    "   \\    /\\    /   | |_| | |  |\\  \\----.|  '--'  ||  `----. ___) | \n"
    "    \\__/  \\__/     \\___/  | _| `._____||_______/ |_______||____/  \n"
    "                                                                  \n"
    "\n"
)

_WORK = (
    "____    __    ____  ______   .______       __  ___ \n"
    "\\   \\  /  \\  /   / /  __  \\  |   _  \\     |  |/  / \n"
    " \\   \\/    \\/   / |  |  |  | |  |_)  |    |  '  /  \n"
    "  \\            /  |  |  |  | |      /     |    <   \n"
    "   \\    /\\    /   |  `--'  | |  |\\  \\----.|  .  \\  \n"
    "    \\__/  \\__/     \\______/  | _| `._____||__|\\__\\ \n"
    "                                                    \n"
    "\n"
)

_STORE_LIST = (
    "     _______.___________.  ______   .______       _______     __       __       _______.___________.\n"
    "    /       |           | /  __  \\  |   _  \\     |   ____|   |  |     |  |     /       |           |\n"
    "   |   (----`---|  |----`|  |  |  | |  |_)  |    |  |__      |  |     |  |    |   (----`---|  |----`\n"
    "    \\   \\       |  |     |  |  |  | |      /     |   __|     |  |     |  |     \\   \\       |  |     \n"
    ".----)   |      |  |     |  `--'  | |  |\\  \\----.|  |____    |  `----.|  | .----)   |      |  |     \n"
    "|_______/       |__|      \\______/  | _| `._____||_______|   |_______||__| |_______/       |__|     \n"
    "                                                                                                     \n"
    "\n"
)

_STORE_REMOVE = (
    "     _______.___________.  ______   .______       _______    .______       _______ .___  ___.   ______   ____    ____  _______ \n"
    "    /       |           | /  __  \\  |   _  \\     |   ____|   |   _  \\     |   ____||   \\/   |  /  __  \\  \\   \\  /   / |   ____|\n"
    "   |   (----`---|  |----`|  |  |  | |  |_)  |    |  |__      |  |_)  |    |  |__   |  \\  /  | |  |  |  |  \\   \\/   /  |  |__   \n"
    "    \\   \\       |  |     |  |  |  | |      /     |   __|     |      /     |   __|  |  |\\/|  | |  |  |  |   \\      /   |   __|  \n"
    ".----)   |      |  |     |  `--'  | |  |\\  \\----.|  |____    |  |\\  \\----.|  |____ |  |  |  | |  `--'  |    \\    /    |  |____ \n"
    "|_______/       |__|      \\______/  | _| `._____||_______|   | _| `._____||_______||__|  |__|  \\______/      \\__/     |_______|\n"
    "                                                                                                                                \n"
    "\n"
)

_STORE_SUPPLY = (
    "     _______.___________.  ______   .______       _______         _______. __    __  .______   .______    __      ____    ____ \n"
    "    /       |           | /  __  \\  |   _  \\     |   ____|       /       ||  |  |  | |   _  \\  |   _  \\  |  |     \\   \\  /   / \n"
    "   |   (----`---|  |----`|  |  |  | |  |_)  |    |  |__         |   (----`|  |  |  | |  |_)  | |  |_)  | |  |      \\   \\/   /  \n"
    "    \\   \\       |  |     |  |  |  | |      /     |   __|         \\   \\    |  |  |  | |   ___/  |   ___/  |  |       \\_    _/   \n"
    ".----)   |      |  |     |  `--'  | |  |\\  \\----.|  |____    .----)   |   |  `--'  | |  |      |  |      |  `----.    |  |     \n"
    "|_______/       |__|      \\______/  | _| `._____||_______|   |_______/     \\______/  | _|      | _|      |_______|    |__|     \n"
    "                                                                                                                                \n"
    "\n"
)

_STORE_REQUEST = (
    "     _______.___________.  ______   .______       _______    .______       _______   ______      __    __   _______     _______.___________.\n"
    "    /       |           | /  __  \\  |   _  \\     |   ____|   |   _  \\     |   ____| /  __  \\    |  |  |  | |   ____|   /       |           |\n"
    "   |   (----`---|  |----`|  |  |  | |  |_)  |    |  |__      |  |_)  |    |  |__   |  |  |  |   |  |  |  | |  |__     |   (----`---|  |----`\n"
    "    \\   \\       |  |     |  |  |  | |      /     |   __|     |      /     |   __|  |  |  |  |   |  |  |  | |   __|     \\   \\       |  |     \n"
    ".----)   |      |  |     |  `--'  | |  |\\  \\----.|  |____    |  |\\  \\----.|  |____ |  `--'  '--.|  `--'  | |  |____.----)   |      |  |     \n"
    "|_______/       |__|      \\______/  | _| `._____||_______|   | _| `._____||_______| \\_____\\_____\\\\______/  |_______|_______/       |__|     \n"
    "                                                                                                                                             \n"
    "\n"
)


def _out(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def clear_terminal(file: TextIO | None = None) -> None:
    """Clear the terminal by writing the ANSI clear-screen sequence."""
    stream = _out(file)
    stream.write(CLEAR_SEQUENCE)
    stream.flush()


def display(text: str, clear: bool = False, file: TextIO | None = None) -> None:
    """Write text to the terminal, clearing the screen first if asked."""
    stream = _out(file)
    if clear:
        clear_terminal(stream)
    stream.write(text)
    stream.flush()


def welcome_message() -> None:
    """Clear the screen and show the opening banner."""
    display(_WELCOME, clear=True)


def thank_you_letter() -> None:
    """Clear the screen and show the farewell banner."""
    display(_THANK_YOU, clear=True)


def art_help() -> None:
    """Clear the screen and show the HELP banner."""
    display(_HELP, clear=True)


def art_register() -> None:
    display(_REGISTER)


def art_login() -> None:
    display(_LOGIN)


def welcome_menu_list() -> None:
    display(_WELCOME_MENU)


def welcome_help_menu() -> None:
    art_help()
    display(_WELCOME_HELP)


def login_help_menu() -> None:
    art_help()
    display(_LOGIN_HELP)


def login_menu_list() -> None:
    display(_LOGIN_MENU)


def main_help_menu() -> None:
    art_help()
    display(_MAIN_HELP)


def main_menu_list() -> None:
    display(_MAIN_MENU)


def work_challenge_list() -> None:
    """Clear the screen and list the paid work challenges."""
    display(_WORK_CHALLENGE, clear=True)


def art_tebak() -> None:
    display(_TEBAK)


def art_bio() -> None:
    display(_BIO)


def art_wordl() -> None:
    display(_WORDL)


def art_work() -> None:
    display(_WORK)


def art_store_list() -> None:
    display(_STORE_LIST)


def art_store_remove() -> None:
    display(_STORE_REMOVE)


def art_store_supply() -> None:
    display(_STORE_SUPPLY)


def art_store_request() -> None:
    display(_STORE_REQUEST)