# streamdemo/__main__.py

from streamdemo import __version__ as about
from streamdemo.cli.main import main

if __name__ == "__main__":
    main(prog_name=about.__title__)
