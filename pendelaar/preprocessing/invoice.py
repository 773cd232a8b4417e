# -*- coding: utf-8 -*-
"""
Read the fare lines of an NS invoice.

The invoice is a pdf with one line per billed leg. Rail lines and GVB
(tram, bus, metro) lines have different layouts:

.. code-block:: text

    24-06-2025 NS Reizen op saldo spits Hilversum Duivendrecht 2 € 3,00
    24-06-2025 GVB Lijn 5 Centraal Station Museumplein € 2,10

Every other line on the invoice is ignored. A line that looks like a fare
line but has a malformed date or price raises an InvoiceParseError, an
invoice is either read completely or not at all.

"""

import logging
import re
from configparser import ConfigParser
from datetime import date, datetime
from pathlib import Path
from typing import (Dict, Iterable, List, Mapping, NamedTuple, Optional,
                    Sequence, Tuple, Union)

import pdfplumber
from pdfminer.psparser import PSException
from pdfplumber.utils.exceptions import PdfminerException
from tqdm import tqdm

from pendelaar.common.legs import Leg, Provider
from pendelaar.resources.config import load_config, load_known_stations

log = logging.getLogger(__name__)

CONFIG = load_config()

DATE_FORMAT = CONFIG['invoice']['date_format']
CURRENCY = CONFIG['invoice']['currency']

KNOWN_STATIONS = load_known_stations()

StationsByProvider = Mapping[Provider, Sequence[str]]


class InvoiceParseError(Exception):
    "error for a fare line with a malformed field"
    def __init__(self, message: str, line: Optional[str] = None) -> None:
        self.line = line
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)


def _line_patterns(currency: str) -> Dict[Provider, 're.Pattern[str]']:
    cur = re.escape(currency)
    return {
        Provider.NS: re.compile(
            r"^(?P<date>\d{2}-\d{2}-\d{4})\s+NS\s+"
            r"(?P<kenmerk>.+spits|.+weekend)\s+(?P<from_to>.+?)\s+"
            r"(?P<class>\d+)\s+" + cur + r"\s*(?P<price>[\d\.,]+)\s*$"
            ),
        Provider.GVB: re.compile(
            r"^(?P<date>\d{2}-\d{2}-\d{4})\s+GVB\s+"
            r"(?P<kenmerk>Lijn(\s\d+)?)\s+(?P<from_to>.+?)\s+"
            + cur + r"\s*(?P<price>[\d\.,]+)\s*$"
            )
        }


LINE_PATTERNS = _line_patterns(CURRENCY)


class InvoiceFormat(NamedTuple):
    """
    The layout of the fare lines on an invoice

    :param date_format: the strptime format of the dates
    :type date_format: str
    :param patterns: the fare line regex for each provider
    :type patterns: Dict[Provider, re.Pattern]

    """

    date_format: str
    patterns: Dict[Provider, 're.Pattern[str]']

    @classmethod
    def from_config(cls, config: ConfigParser) -> 'InvoiceFormat':
        """the invoice layout in the [invoice] section of a config"""
        if not config.has_section('invoice'):
            return DEFAULT_FORMAT
        section = config['invoice']
        return cls(
            section.get('date_format', DATE_FORMAT),
            _line_patterns(section.get('currency', CURRENCY))
            )


DEFAULT_FORMAT = InvoiceFormat(DATE_FORMAT, LINE_PATTERNS)


def parse_price(text: str) -> float:
    """
    Parse a price with a comma as the decimal separator

    :param text: the price text, ie '3,45'
    :type text: str
    :raises InvoiceParseError: if the text is not a price
    :return: the price
    :rtype: float

    """
    normalized = text.strip().replace(',', '.')
    try:
        return float(normalized)
    except ValueError as e:
        raise InvoiceParseError("malformed price", text) from e


def parse_date(text: str, fmt: str = DATE_FORMAT) -> date:
    """parse an invoice date, ie '24-06-2025'"""
    try:
        return datetime.strptime(text.strip(), fmt).date()
    except ValueError as e:
        raise InvoiceParseError("malformed date", text) from e


def extract_stations(
        text: str,
        known_stations: Iterable[str]
    ) -> Tuple[str, str]:
    """
    Find the origin and destination in the station part of a fare line.
    The origin is the known station the text starts with and the
    destination the one it ends with. The longest name wins, so that
    'Hilversum Noord' is not read as 'Hilversum'.

    :param text: the station part of the line
    :type text: str
    :param known_stations: the station names to look for
    :type known_stations: Iterable[str]
    :return: the origin and destination, an empty string if not found
    :rtype: Tuple[str, str]

    """
    start, end = '', ''
    for station in known_stations:
        if text.startswith(station) and len(station) > len(start):
            start = station
        if text.endswith(station) and len(station) > len(end):
            end = station
    return start, end


def parse_line(
        line: str,
        known_stations: Optional[StationsByProvider] = None,
        invoice_format: Optional[InvoiceFormat] = None
    ) -> Optional[Leg]:
    """
    Parse a single invoice line.

    :param line: the text line
    :type line: str
    :param known_stations: the station names for each provider,
        defaults to the packaged stations
    :type known_stations: Optional[StationsByProvider], optional
    :param invoice_format: the date format and line patterns,
        defaults to the packaged [invoice] settings
    :type invoice_format: Optional[InvoiceFormat], optional
    :raises InvoiceParseError: if a fare line has a malformed date or price
    :return: the leg on the line, None if it is not a fare line or a GVB
        line with unrecognised stops
    :rtype: Optional[Leg]

    """
    if known_stations is None:
        known_stations = KNOWN_STATIONS
    if invoice_format is None:
        invoice_format = DEFAULT_FORMAT

    for provider, pattern in invoice_format.patterns.items():
        match = pattern.match(line.strip())
        if match is None:
            continue
        origin, destination = extract_stations(
            match['from_to'], known_stations.get(provider, ())
            )
        if provider is Provider.GVB and not (origin and destination):
            log.debug("skipping GVB line without known stops: %r", line)
            return None
        if not (origin and destination):
            log.warning("unrecognised station in line: %r", line)

        return Leg(
            parse_date(match['date'], invoice_format.date_format),
            provider,
            origin,
            destination,
            parse_price(match['price'])
            )
    return None


def parse_lines(
        lines: Iterable[str],
        known_stations: Optional[StationsByProvider] = None,
        invoice_format: Optional[InvoiceFormat] = None
    ) -> Tuple[List[Leg], List[Leg]]:
    """
    Parse the lines of an invoice

    :param lines: the invoice text lines in document order
    :type lines: Iterable[str]
    :param known_stations: the station names for each provider,
        defaults to the packaged stations
    :type known_stations: Optional[StationsByProvider], optional
    :param invoice_format: the date format and line patterns,
        defaults to the packaged [invoice] settings
    :type invoice_format: Optional[InvoiceFormat], optional
    :return: the NS legs and the GVB legs, each in document order
    :rtype: Tuple[List[Leg], List[Leg]]

    """
    ns_legs: List[Leg] = []
    gvb_legs: List[Leg] = []
    for leg in legs_from_lines(lines, known_stations, invoice_format):
        if leg.provider is Provider.NS:
            ns_legs.append(leg)
        else:
            gvb_legs.append(leg)
    return ns_legs, gvb_legs


def legs_from_lines(
        lines: Iterable[str],
        known_stations: Optional[StationsByProvider] = None,
        invoice_format: Optional[InvoiceFormat] = None
    ) -> List[Leg]:
    """all the legs on the invoice lines in document order"""
    legs = []
    for line in lines:
        leg = parse_line(line, known_stations, invoice_format)
        if leg is not None:
            legs.append(leg)
    log.info("read %d legs from the invoice", len(legs))
    return legs


def read_invoice_text(path: Union[str, Path]) -> List[str]:
    """
    Read the text lines of an invoice. Pdf files are read page by page,
    a .txt file is taken to be a text export of the invoice.

    :param path: the path to the invoice
    :type path: Union[str, Path]
    :raises FileNotFoundError: if the file does not exist
    :raises ValueError: if the file is not a .pdf or .txt file
    :raises InvoiceParseError: if the pdf cannot be read
    :return: the lines of the invoice
    :rtype: List[str]

    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"invoice {path} does not exist")

    suffix = path.suffix.lower()
    if suffix == '.txt':
        return path.read_text(encoding='utf8').splitlines()
    if suffix != '.pdf':
        raise ValueError("invoice must be a .pdf or a .txt file")

    lines: List[str] = []
    try:
        with pdfplumber.open(path) as pdf:
            for page in tqdm(pdf.pages, 'reading invoice pages'):
                text = page.extract_text() or ''
                lines.extend(text.split('\n'))
    except (PdfminerException, PSException) as e:
        raise InvoiceParseError("cannot read pdf", str(path)) from e
    return lines
