# src/hmcon_shell/core/utils/helptext.py
from hmcon_shell.core.command_registry import CommandContext
from hmcon_shell.core.context.job import Job
from hmcon_shell.core.context.session_context import SessionContext

SEPARATOR = "--------------------"

BATCH_OPTIONS = [
    ("join", "Joins all files into one large file"),
    ("equalizeheightmaps", "Equalizes all heightmaps with the same low and high values"),
]


def print_input_options(ctx: SessionContext) -> None:
    """The prompt shown while no job is active."""
    out = ctx.reporter
    out.line("Enter path to input file:")
    out.line("or type 'batch' and a path to perform batch operations")
    for spec in ctx.registry.commands(CommandContext.BEFORE_IMPORT):
        out.list_entry(spec.usage, spec.description, 0, False)
    out.list_entry("exit", "Quit the program", 0, False)


def print_export_options(ctx: SessionContext, job: Job) -> None:
    """Lists everything that can be typed while configuring the export."""
    out = ctx.reporter
    out.line(SEPARATOR)
    if job.batch_mode:
        out.line("Note: The following export options will be applied to all files in this batch.")
    out.line("* = Required setting")
    out.line("Export options:")
    out.list_entry("format N..", "Export to the specified format(s)", 0, True)
    for fmt in ctx.export_manager.get_supported_formats():
        out.list_entry(fmt.command_key, fmt.description, 1, False)
    for spec in ctx.registry.commands(CommandContext.AFTER_IMPORT):
        out.list_entry(spec.name, spec.description, 0, False)
    out.list_entry("define N V", "Define a variable, used as ${N}", 0, False)
    out.list_entry("definep N [P]", "Ask for the value of a variable", 0, False)
    out.list_entry("mod X..", "Modification commands", 0, False)
    for spec in ctx.registry.modifiers():
        out.list_entry(spec.name, spec.description, 1, False)
    if job.batch_mode:
        out.special("Batch export options:")
        for name, desc in BATCH_OPTIONS:
            out.list_entry(name, desc, 0, False)
    out.line("")
    out.line("Type 'export' when ready to export")
    out.line("Type 'abort' to abort export")
    out.line(SEPARATOR)
