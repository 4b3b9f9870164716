"""Lua version module

Shown when the current directory contains a ``.lua-version`` file, a
``lua`` folder, or any ``.lua`` file.
"""

import logging
import re
from typing import Optional

from ..context import Context
from ..formatter import FormatterError, StringFormatter
from ..module import Module

logger = logging.getLogger(__name__)

LUA_VERSION_PATTERN = re.compile(r"(?P<version>[\d\.]+[a-z\-]*[1-9]*)[^\s]*")


def module(context: Context) -> Optional[Module]:
    is_lua_project = (context.begin_scan()
                      .set_files(['.lua-version'])
                      .set_folders(['lua'])
                      .set_extensions(['lua'])
                      .is_match())
    if not is_lua_project:
        return None

    config = context.config.lua
    if config.disabled:
        return None
    lua_module = context.new_module('lua')

    def version(variable: str) -> Optional[str]:
        if variable != 'version':
            return None
        output = get_lua_version(context, config.lua_binary)
        return format_lua_version(output) if output else None

    try:
        segments = (StringFormatter(config.format)
                    .map_meta(lambda variable, _: config.symbol if variable == 'symbol' else None)
                    .map_style(lambda variable: config.style if variable == 'style' else None)
                    .map(version)
                    .parse())
    except FormatterError as error:
        logger.warning("Error in module `lua`:\n%s", error)
        return None

    lua_module.set_segments(segments)
    return lua_module


def get_lua_version(context: Context, lua_binary: str) -> Optional[str]:
    """Output of ``lua -v``; older interpreters print it on stderr"""
    output = context.exec_cmd(lua_binary, ['-v'])
    if output is None:
        return None
    return output.stdout if output.stdout else output.stderr


def format_lua_version(lua_stdout: str) -> Optional[str]:
    """
    Extract the version number

    ``lua -v``:    Lua 5.4.0  Copyright (C) 1994-2020 Lua.org, PUC-Rio
    ``luajit -v``: LuaJIT 2.0.5 -- Copyright (C) 2005-2017 Mike Pall. http://luajit.org/
    """
    match = LUA_VERSION_PATTERN.search(lua_stdout)
    if match is None:
        return None
    return match.group('version')
