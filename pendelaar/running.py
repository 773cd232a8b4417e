# -*- coding: utf-8 -*-
"""
Command line output for the pendelaar scripts: section banners and
logging to the terminal
"""
import logging


def banner(text, chrc='=', length=70):
    """print the text centred in a line of chrc to mark a section"""
    line = f' {text} '.center(length, chrc)
    print('')
    print(line)
    return line


def setup_logging(level=logging.INFO):
    """log to the cmd line with the module name and level"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
        )
