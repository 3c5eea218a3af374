import logging
import re
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from pyptable.core.typedefs import ElectronicConfiguration, SUBSHELL_LAYOUT
from pyptable.data.constants import ElementConstants, ErrorMessages
from pyptable.parsing.validation.errors import ElectronConfigurationError

logger = logging.getLogger(__name__)

# "[Ne]" prefix: one upper-case letter, optionally one lower-case letter
_REFERENCE_PATTERN = re.compile(r'\[([A-Z][a-z]?)\]')
# "3p5": shell number, subshell letter, occupancy
_TOKEN_PATTERN = re.compile(r'(\d+)([spdf])(\d+)')

ConfigurationToken = Tuple[int, str, int]


def parse_shorthand(symbol: str, text: str) -> Tuple[Optional[str], List[ConfigurationToken]]:
    """
    Split shorthand such as "[Ne]3s2 3p5" into the referenced symbol and explicit tokens.

    Everything from the first '(' on is an annotation ("(predicted)") and is discarded.
    Returns:
        (reference symbol or None, [(shell, subshell, occupancy), ...])
    Raises:
        ElectronConfigurationError: If the reference or a token is malformed.
    """
    body = text.split('(', 1)[0].strip()
    reference = None
    if body.startswith('['):
        match = _REFERENCE_PATTERN.match(body)
        if match is None:
            raise ElectronConfigurationError(symbol, text, ErrorMessages.MALFORMED_TOKEN.format(
                token=body.split()[0], symbol=symbol, text=text))
        reference = match.group(1)
        body = body[match.end():]
    tokens = []
    for token in body.split():
        match = _TOKEN_PATTERN.fullmatch(token)
        if match is None:
            raise ElectronConfigurationError(symbol, text, ErrorMessages.MALFORMED_TOKEN.format(
                token=token, symbol=symbol, text=text))
        tokens.append((int(match.group(1)), match.group(2), int(match.group(3))))
    return reference, tokens


def resolve_configuration(symbol: str,
                          shorthand_by_symbol: Mapping[str, str],
                          cache: Dict[str, ElectronicConfiguration],
                          _chain: Tuple[str, ...] = ()) -> ElectronicConfiguration:
    """
    Resolve the electron configuration of one element.

    A bracketed reference is resolved first (recursively) and used as the base; each explicit
    token then overwrites its slot in a copy of that base. Results are memoised in ``cache``,
    which the caller owns and which should not outlive one compilation pass.
    Args:
        symbol: Element to resolve.
        shorthand_by_symbol: Shorthand text of every element in the pass, keyed by symbol.
        cache: Resolved configurations keyed by symbol; read and updated.
    Returns:
        The resolved ElectronicConfiguration.
    Raises:
        ElectronConfigurationError: For malformed text, unknown or cyclic references, a shell
            outside its subshell's slot range, or an occupancy above the maximum.
    """
    if symbol in cache:
        return cache[symbol]
    text = shorthand_by_symbol[symbol]
    reference, tokens = parse_shorthand(symbol, text)
    if reference is None:
        base = ElectronicConfiguration.empty()
    else:
        if reference not in shorthand_by_symbol or reference in _chain or reference == symbol:
            raise ElectronConfigurationError(symbol, text, ErrorMessages.UNKNOWN_REFERENCE.format(
                symbol=symbol, reference=reference))
        base = resolve_configuration(reference, shorthand_by_symbol, cache, _chain + (symbol,))
    slots = {subshell: list(getattr(base, subshell)) for subshell in SUBSHELL_LAYOUT}
    for shell, subshell, occupancy in tokens:
        min_shell, slot_count = SUBSHELL_LAYOUT[subshell]
        index = shell - min_shell
        if not 0 <= index < slot_count:
            raise ElectronConfigurationError(symbol, text, ErrorMessages.SHELL_OUT_OF_RANGE.format(
                shell=shell, subshell=subshell, symbol=symbol, text=text))
        if occupancy > ElementConstants.MAX_OCCUPANCY:
            raise ElectronConfigurationError(
                symbol, text, f"Occupancy {occupancy} of {shell}{subshell} exceeds "
                              f"{ElementConstants.MAX_OCCUPANCY} in configuration of '{symbol}': '{text}'")
        slots[subshell][index] = occupancy
    result = ElectronicConfiguration(**{subshell: tuple(values) for subshell, values in slots.items()})
    cache[symbol] = result
    logger.debug("Resolved %s: '%s' -> %d electrons", symbol, text, result.total_electrons())
    return result


def resolve_all(symbols: Sequence[str], shorthands: Sequence[str]) -> List[ElectronicConfiguration]:
    """Resolve every element of one compilation pass with a fresh memo cache."""
    shorthand_by_symbol = dict(zip(symbols, shorthands))
    cache: Dict[str, ElectronicConfiguration] = {}
    configurations = [resolve_configuration(symbol, shorthand_by_symbol, cache) for symbol in symbols]
    logger.info("Resolved %d electron configurations", len(configurations))
    return configurations
