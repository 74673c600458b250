"""Grammar routines that build the configuration tree.

    config        := (key_or_entity)* EOF
    key_or_entity := ID (":" entity | "=" key) ";"
    entity        := "{" key_or_entity (key_or_entity)* "}"
    key           := value | "[" array_body "]" | "<" list_body ">" | "{" pairs_body "}"
    value         := INTEGER | STRING | DOUBLE
    array_body    := value ("," value)*
    list_body     := (value | "<" list_body ">") ("," (value | "<" list_body ">"))*
    pairs_body    := (ID "=" value ";")*

Each routine returns the node it built and leaves attaching it to the caller,
so a node only joins the tree once its enclosing rule has fully succeeded.
"""

from __future__ import annotations

import logging
from typing import Final

from confslice.lexer import TokenKind
from confslice.model import Array, Configuration, Data, DataKind, Entity, Key, List, Pairs, Value
from confslice.parser.parser import Parser

logger = logging.getLogger(__name__)

EXPECTED_DEFINITION: Final[str] = "Entity or key definition"
EXPECTED_COLON_OR_ASSIGN: Final[str] = ": or ="
EXPECTED_SEMICOLON: Final[str] = ";"
EXPECTED_LBRACE: Final[str] = "{"
EXPECTED_RBRACE: Final[str] = "}"
EXPECTED_KEY_VALUE: Final[str] = "Either a value, [, <, or {"
EXPECTED_VALUE: Final[str] = "A value"
EXPECTED_RBRACKET: Final[str] = "]"
EXPECTED_VALUE_OR_LIST: Final[str] = "A value or a <"
EXPECTED_RANGLE: Final[str] = ">"
EXPECTED_ASSIGN: Final[str] = "="

_DATA_KINDS: Final[dict[TokenKind, DataKind]] = {
    TokenKind.INTEGER: DataKind.INTEGER,
    TokenKind.DOUBLE: DataKind.DOUBLE,
    TokenKind.STRING: DataKind.STRING,
}

type Scope = Configuration | Entity


def parse_config(parser: Parser) -> Configuration:
    config = Configuration()
    try:
        while parser.at(TokenKind.IDENTIFIER):
            parse_key_or_entity(parser, config, depth=0)
    except RecursionError:
        raise parser.nesting_error() from None

    if not parser.at(TokenKind.EOF):
        parser.error(EXPECTED_DEFINITION)
    return config


def parse_key_or_entity(parser: Parser, scope: Scope, depth: int) -> None:
    """Parse one ``ID : entity ;`` or ``ID = key ;`` member into `scope`.

    `depth` is the nesting depth of `scope`: 0 for the configuration root.
    """
    member_id = parser.bump().text

    member: Entity | Key
    if parser.eat(TokenKind.COLON):
        member = parse_entity(parser, member_id, depth)
    elif parser.eat(TokenKind.ASSIGN):
        member = parse_key(parser, member_id)
    else:
        parser.error(EXPECTED_COLON_OR_ASSIGN)

    parser.expect(TokenKind.SEMICOLON, EXPECTED_SEMICOLON)
    _attach(scope, member, depth)


def parse_entity(parser: Parser, entity_id: str, depth: int) -> Entity:
    depth += 1
    parser.expect(TokenKind.LBRACE, EXPECTED_LBRACE)
    if not parser.at(TokenKind.IDENTIFIER):
        parser.error(EXPECTED_DEFINITION)

    entity = Entity(entity_id)
    while parser.at(TokenKind.IDENTIFIER):
        parse_key_or_entity(parser, entity, depth)

    parser.expect(TokenKind.RBRACE, EXPECTED_RBRACE)
    logger.debug("Closed entity %r at depth %d", entity_id, depth)
    return entity


def parse_key(parser: Parser, key_id: str) -> Key:
    if parser.current_kind.is_value:
        return Value(key_id, parse_value(parser, EXPECTED_KEY_VALUE))
    if parser.at(TokenKind.LBRACKET):
        return parse_array(parser, key_id)
    if parser.at(TokenKind.LANGLE):
        return parse_list(parser, key_id)
    if parser.at(TokenKind.LBRACE):
        return parse_pairs(parser, key_id)
    parser.error(EXPECTED_KEY_VALUE)


def parse_value(parser: Parser, expected: str) -> Data:
    if not parser.current_kind.is_value:
        parser.error(expected)
    token = parser.bump()
    return Data(token.text, _DATA_KINDS[token.kind])


def parse_array(parser: Parser, key_id: str) -> Array:
    """Parse ``[v0, v1, ...]``; elements are indexed by position from 0."""
    parser.expect(TokenKind.LBRACKET, EXPECTED_KEY_VALUE)
    array = Array(key_id)
    index = 0
    while True:
        array[index] = parse_value(parser, EXPECTED_VALUE)
        index += 1
        if not parser.eat(TokenKind.COMMA):
            break

    parser.expect(TokenKind.RBRACKET, EXPECTED_RBRACKET)
    return array


def parse_list(parser: Parser, key_id: str) -> List:
    """Parse ``<...>`` with nested lists recursively; sublists share `key_id`."""
    parser.expect(TokenKind.LANGLE, EXPECTED_KEY_VALUE)
    klist = List(key_id)
    while True:
        if parser.at(TokenKind.LANGLE):
            klist.insert_list(parse_list(parser, key_id))
        else:
            klist.insert_data(parse_value(parser, EXPECTED_VALUE_OR_LIST))
        if not parser.eat(TokenKind.COMMA):
            break

    parser.expect(TokenKind.RANGLE, EXPECTED_RANGLE)
    return klist


def parse_pairs(parser: Parser, key_id: str) -> Pairs:
    """Parse ``{ id = value; ... }``; an empty block is allowed.

    Entries are only stored when `ParserOptions.retain_pairs` is set.
    """
    parser.expect(TokenKind.LBRACE, EXPECTED_KEY_VALUE)
    pairs = Pairs(key_id)
    retain = parser.options.retain_pairs
    while parser.at(TokenKind.IDENTIFIER):
        pair_id = parser.bump().text
        parser.expect(TokenKind.ASSIGN, EXPECTED_ASSIGN)
        value = parse_value(parser, EXPECTED_VALUE)
        parser.expect(TokenKind.SEMICOLON, EXPECTED_SEMICOLON)
        if retain:
            pairs.insert(pair_id, value)

    parser.expect(TokenKind.RBRACE, EXPECTED_RBRACE)
    return pairs


def _attach(scope: Scope, member: Entity | Key, depth: int) -> None:
    if isinstance(member, Entity):
        added = scope.add_entity(member)
    else:
        added = scope.add_key(member)
    if not added:
        logger.debug("Dropping duplicate id %r at depth %d", member.id, depth)
