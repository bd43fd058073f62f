"""Command-line interface for downsync."""

from __future__ import annotations

import asyncio as asyncio
import logging as logging

from downsync import Downsync as Downsync
from downsync import load_config as load_config
from downsync.cli.app import main as main
from downsync.cli.commands import doctor as doctor_command
from downsync.cli.commands import resolve as resolve_command
from downsync.cli.commands import sync as sync_command
from downsync.cli.commands import watch as watch_command
from downsync.cli.parser import build_parser as build_parser
from downsync.cli.parser import selected_mode as selected_mode

_format_summary = sync_command.format_sync_summary
_format_watch_summary = watch_command.format_watch_summary
_format_resolve_summary = resolve_command.format_resolve_summary

_run_sync = sync_command.run_sync
_run_watch = watch_command.run_watch
_run_resolve = resolve_command.run_resolve
_run_doctor = doctor_command.run_doctor
