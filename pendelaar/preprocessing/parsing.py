"""
Parsing contains a class to parse command line arguments for
pendelaar scripts. It defines allowable arguments and default
values
"""
from argparse import (
    ArgumentParser,
    RawTextHelpFormatter
    )
from typing import Any, Dict, NamedTuple, Optional, Sequence, Type, Union

import pathlib


class ArgTuple(NamedTuple):

    short: str
    long: str
    help_: str
    required: bool
    type_: Union[Type[str], Type[int], Type[pathlib.Path]]
    default: Any

class TableArgParser:

    ARGUMENTS = {
        'input': ArgTuple(
            '-i',
            '--input',
            'path to the NS invoice, a .pdf or a .txt export',
            True,
            pathlib.Path,
            None
            ),
        'config': ArgTuple(
            '-c',
            '--config',
            'path to an ini file with the home and work stations',
            False,
            pathlib.Path,
            None
            ),
        'output': ArgTuple(
           '-o',
           '--output',
           'path to a csv file for the commute legs',
           False,
           pathlib.Path,
           None
           ),
        'workdays': ArgTuple(
           '-w',
           '--workdays',
           'only keep legs on working days (1) or keep all days (0).\n'
           'defaults to the workdays_only setting in the config',
           False,
           int,
           None
           )
        }

    def __init__(self, *args: str, description: Optional[str] = None) -> None:
        """
        A Basic argument parser for scripts in pendelaar. Allows only a
        specific subset of arguments that make sense in this context.

        :param *args: The arguments allowed in the argparser
        :type *args: str
        :param description: A description of the argument, defaults to None
        :type description: Optional[str], optional
        :raises ValueError: if the given argument is not supported
        :return: ''
        :rtype: None

        """

        self.arglist = [x.lower() for x in args]

        if not all(x in self.ARGUMENTS for x in self.arglist):
            odd_args = {x for x in self.arglist if x not in self.ARGUMENTS}
            raise ValueError(
                f"{sorted(map(str, odd_args))} not supported"
                )

        self.description = description

        self.parser = ArgumentParser(
            description=self.description,
            formatter_class=RawTextHelpFormatter
            )
        for arg in self.arglist:
            opt = self.ARGUMENTS[arg]
            self.parser.add_argument(
                opt.short, opt.long,
                help=opt.help_,
                type=opt.type_,
                required=opt.required,
                default=opt.default
                )

    def parse(
            self, argv: Optional[Sequence[str]] = None
        ) -> Dict[str, Union[int, pathlib.Path, str]]:
        """
        Parse the given arguments

        :param argv: the arguments to parse, defaults to sys.argv
        :type argv: Optional[Sequence[str]], optional
        :return: dictionary of arguments and values
        :rtype: Dict[str, Union[int, pathlib.Path, str]]

        """

        return vars(self.parser.parse_args(argv))
