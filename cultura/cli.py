"""CLI interface for CULTURA"""

import sys
import time
import threading
import itertools
import argparse
import logging
import textwrap
from contextlib import contextmanager
from typing import Optional

from colorama import init, Fore, Style

from .agent import ChatOrchestrator
from .chatbot import ChatKnowledgeResolver
from .conversation import ChatMessage
from .errors import CulturaError
from .fun_facts import get_random_fun_fact
from .languages import SUPPORTED_LANGUAGES
from .store import KnowledgeStore
from .translator import TranslationResolver
from . import __version__, __author__, __powered_by__

# Initialize colorama for Windows support
init(autoreset=True)

logger = logging.getLogger(__name__)


# ── Output helpers ───────────────────────────────────────────────────────────
_FRAMES = '⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏'


def _typewrite(text: str, color: str = Fore.WHITE, delay: float = 0.010, end: str = '\n'):
    """Print text one character at a time, about a second at most per line."""
    delay = min(delay, 1.0 / max(len(text), 1))
    sys.stdout.write(color)
    for ch in text:
        sys.stdout.write(ch)
        sys.stdout.flush()
        time.sleep(delay)
    sys.stdout.write(Style.RESET_ALL + end)
    sys.stdout.flush()


@contextmanager
def _spinner(message: str, color: str = Fore.YELLOW):
    """Braille spinner on the current line while the block runs."""
    done = threading.Event()

    def spin():
        for frame in itertools.cycle(_FRAMES):
            if done.wait(0.09):
                return
            sys.stdout.write(f"\r{color}  {frame}  {message}{Style.RESET_ALL}")
            sys.stdout.flush()

    thread = threading.Thread(target=spin, daemon=True)
    thread.start()
    try:
        yield
    finally:
        done.set()
        thread.join()
        sys.stdout.write('\r' + ' ' * (len(message) + 8) + '\r')
        sys.stdout.flush()


_SOURCE_LABELS = {
    'offline':          "offline knowledge base",
    'offline-fallback': "offline knowledge base (language model unavailable)",
    'llm':              "language model, grounded in the cultural database",
}


def build_orchestrator() -> ChatOrchestrator:
    """Wire the store, offline resolver and language model together"""
    resolver = ChatKnowledgeResolver(KnowledgeStore())
    return ChatOrchestrator(resolver)


class CulturaCLI:
    """Interactive CLI for CULTURA"""

    def __init__(self):
        self.orchestrator: Optional[ChatOrchestrator] = None
        self.translator: Optional[TranslationResolver] = None
        self.running = False

    def print_banner(self):
        rule = f"{Fore.MAGENTA}{'═' * 62}{Style.RESET_ALL}"
        credits = f"v{__version__}  ·  {__powered_by__}"
        print(f"\n{rule}")
        print(f"{Fore.CYAN + Style.BRIGHT}{'C U L T U R A':^62}{Style.RESET_ALL}")
        print(f"{Fore.YELLOW}{'Cultural Heritage of Northeast India':^62}{Style.RESET_ALL}")
        print(f"{Fore.WHITE}{credits:^62}{Style.RESET_ALL}")
        print(f"{rule}\n")

    def print_help(self):
        bar = f"{Fore.CYAN}{'─' * 60}{Style.RESET_ALL}"
        print(f"\n{bar}")
        _typewrite("  Commands", Fore.CYAN + Style.BRIGHT, delay=0.035)
        print(bar)

        for cmd, desc in [
            ("help",                    "Show this help message"),
            ("translate <lang> <text>", "Translate English text (as, mni, bn, hi)"),
            ("languages",               "List supported languages"),
            ("fact",                    "Show a random fun fact"),
            ("topics",                  "List topics the offline assistant knows"),
            ("samples",                 "Show sample questions"),
            ("stats",                   "Show translation and conversation statistics"),
            ("health",                  "Check the remote translation service"),
            ("version",                 "Show version and credits"),
            ("quit",                    "Exit the application"),
        ]:
            print(f"  {Fore.GREEN}{cmd:<25}{Style.RESET_ALL}{Fore.WHITE}{desc}{Style.RESET_ALL}")

        print(f"\n{Fore.CYAN + Style.BRIGHT}  Usage{Style.RESET_ALL}")
        print("  Ask anything about festivals, rituals, food and dance of the eight states.\n")
        print(f"{bar}\n")

    def print_response(self, message: ChatMessage, source: str = ''):
        sep   = f"{Fore.GREEN}{'─' * 62}{Style.RESET_ALL}"
        label = f"{Fore.GREEN + Style.BRIGHT}  CULTURA{Style.RESET_ALL}"
        print(f"\n{sep}")
        print(label)
        print(sep)

        for raw_line in message.content.splitlines():
            chunks = textwrap.wrap(raw_line, width=88) if len(raw_line) > 88 else [raw_line]
            for line in chunks:
                if not line.strip():
                    print()
                else:
                    _typewrite(line, Fore.WHITE)

        if message.sources:
            print(f"\n{Fore.CYAN}  Sources{Style.RESET_ALL}")
            for s in message.sources:
                print(f"  {Fore.YELLOW}›{Style.RESET_ALL} {s.name} {Fore.WHITE}({s.attribution}){Style.RESET_ALL}")
        if source in _SOURCE_LABELS:
            print(f"{Fore.MAGENTA}  [{_SOURCE_LABELS[source]}]{Style.RESET_ALL}")
        print(f"{sep}\n")

    def print_error(self, error: str):
        print(f"\n{Fore.RED}  ✗  {error}{Style.RESET_ALL}\n")

    def get_input(self) -> str:
        try:
            prompt = (
                f"{Fore.LIGHTMAGENTA_EX}  ╰─{Style.RESET_ALL}"
                f"{Fore.LIGHTMAGENTA_EX + Style.BRIGHT} You {Style.RESET_ALL}"
                f"{Fore.LIGHTMAGENTA_EX}›{Style.RESET_ALL} "
            )
            return input(prompt).strip()
        except (KeyboardInterrupt, EOFError):
            return "quit"

    def initialize(self) -> bool:
        print()
        try:
            with _spinner("Loading cultural knowledge…"):
                self.orchestrator = build_orchestrator()
                self.translator = TranslationResolver()
        except CulturaError as e:
            self.print_error(f"Failed to initialize: {e}")
            logger.exception("Initialization error")
            return False
        print(f"{Fore.GREEN}  ✓  Ready!{Style.RESET_ALL}\n")
        self.print_response(self.orchestrator.conversation.messages[0])
        return True

    # ── Commands ────────────────────────────────────────────────────────────

    def _translate(self, args: str):
        parts = args.split(maxsplit=1)
        if len(parts) < 2:
            self.print_error("Usage: translate <lang> <text>")
            return
        lang, text = parts
        with _spinner("Translating…", Fore.CYAN):
            result = self.translator.resolve(text, "en", lang)
        print(f"\n  {Fore.GREEN}{result.text}{Style.RESET_ALL}")
        print(f"  {Fore.WHITE}method: {result.method}, confidence: {result.confidence:.1f}{Style.RESET_ALL}\n")

    def _languages(self):
        print()
        for lang in SUPPORTED_LANGUAGES.values():
            print(f"  {Fore.GREEN}{lang.code:<5}{Style.RESET_ALL}{lang.name:<10} {lang.native_name}  "
                  f"{Fore.WHITE}({lang.script}){Style.RESET_ALL}")
        print()

    def _fact(self):
        fact = get_random_fun_fact()
        print(f"\n  {fact['icon']}  {Fore.CYAN}{fact['category']}{Style.RESET_ALL}")
        _typewrite(f"  {fact['fact']}", Fore.WHITE)
        print(f"  {Fore.WHITE}Source: {fact['source']}{Style.RESET_ALL}\n")

    def _topics(self):
        print()
        for topic in self.orchestrator.resolver.get_available_topics():
            print(f"  {Fore.GREEN}{topic['name']:<28}{Style.RESET_ALL}{Fore.WHITE}{topic['type']}{Style.RESET_ALL}")
        print()

    def _samples(self):
        print()
        for question in self.orchestrator.resolver.get_sample_questions():
            print(f"  {Fore.YELLOW}›{Style.RESET_ALL} {question}")
        print()

    def _stats(self):
        stats = self.translator.get_stats()
        summary = self.orchestrator.conversation.get_summary()
        cache = stats['cache']
        print(f"\n  {Fore.CYAN}Translation cache{Style.RESET_ALL}: {cache['size']}/{cache['max_size']} entries, "
              f"hit rate {cache['hit_rate']:.1f}%")
        print(f"  {Fore.CYAN}Curated phrases{Style.RESET_ALL}  : {stats['curated_translations']}")
        print(f"  {Fore.CYAN}Messages{Style.RESET_ALL}         : {summary['total_messages']} "
              f"({summary['offline_messages']} answered offline)\n")

    def _health(self):
        with _spinner("Checking translation service…", Fore.CYAN):
            health = self.translator.check_service_health()
        color = Fore.GREEN if health['available'] else Fore.YELLOW
        detail = f" ({health['error']})" if health.get('error') else ""
        print(f"\n  {color}{health['status']}{detail}{Style.RESET_ALL}\n")

    def handle_command(self, command: str):
        """
        Handle special commands.
        Returns True to continue, False to exit, None if not a command.
        """
        head, _, rest = command.partition(' ')
        cmd = head.lower()

        if cmd in ('quit', 'exit', 'q'):
            _typewrite("\n  Dhanyavaad! Thanks for exploring with CULTURA. 👋", Fore.MAGENTA, delay=0.022)
            print()
            return False

        handlers = {
            'help':      self.print_help,
            'version':   self.print_version,
            'languages': self._languages,
            'fact':      self._fact,
            'topics':    self._topics,
            'samples':   self._samples,
            'stats':     self._stats,
            'health':    self._health,
        }
        if cmd == 'translate':
            self._translate(rest.strip())
            return True
        if cmd in handlers and not rest.strip():
            handlers[cmd]()
            return True
        return None  # Not a command

    def ask(self, question: str):
        with _spinner("Thinking…", Fore.CYAN):
            reply = self.orchestrator.submit(question)
        if reply is not None:
            self.print_response(reply, self.orchestrator.last_source)

    def run(self):
        """Main CLI loop."""
        self.print_banner()
        self.print_help()

        if not self.initialize():
            return

        self.running = True
        while self.running:
            try:
                user_input = self.get_input()
                if not user_input:
                    continue

                result = self.handle_command(user_input)
                if result is False:
                    break
                if result is True:
                    continue

                self.ask(user_input)

            except CulturaError as e:
                self.print_error(str(e))
            except KeyboardInterrupt:
                print(f"\n{Fore.YELLOW}  Use 'quit' to exit.{Style.RESET_ALL}\n")

    def print_version(self):
        print()
        _typewrite(f"  CULTURA v{__version__}", Fore.CYAN + Style.BRIGHT, delay=0.020)
        print(f"  {Fore.GREEN}Developer : {__author__}{Style.RESET_ALL}")
        print(f"  {Fore.CYAN}Powered by: {__powered_by__}{Style.RESET_ALL}")
        print()


def _one_shot_translate(text: str, target: str, source: str) -> int:
    try:
        result = TranslationResolver().resolve(text, source, target)
    except CulturaError as e:
        print(f"{Fore.RED}Error: {e}{Style.RESET_ALL}", file=sys.stderr)
        return 2
    print(result.text)
    return 0


def _one_shot_ask(question: str) -> int:
    try:
        orchestrator = build_orchestrator()
        reply = orchestrator.submit(question)
    except CulturaError as e:
        print(f"{Fore.RED}Error: {e}{Style.RESET_ALL}", file=sys.stderr)
        return 2
    if reply is None:
        print(f"{Fore.RED}Error: empty question{Style.RESET_ALL}", file=sys.stderr)
        return 2
    print(reply.content)
    for s in reply.sources:
        print(f"  - {s.name} ({s.attribution})")
    return 0


def main(argv=None):
    """Main entry point: --version, --about, one-shot --ask/--translate, or interactive mode"""
    parser = argparse.ArgumentParser(
        prog="cultura",
        description="CULTURA: cultural heritage assistant for Northeast India",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"Developed by: {__author__}\n"
            f"Powered by:   {__powered_by__}\n"
            f"Version:      {__version__}"
        ),
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"CULTURA v{__version__}",
    )
    parser.add_argument("--about", action="store_true",
                        help="Show detailed about information and exit")
    parser.add_argument("--ask", metavar="TEXT",
                        help="Answer a single question and exit")
    parser.add_argument("--translate", metavar="TEXT",
                        help="Translate a single text and exit")
    parser.add_argument("--to", dest="target", default="as", metavar="LANG",
                        help="Target language for --translate (default: as)")
    parser.add_argument("--from", dest="source", default="en", metavar="LANG",
                        help="Source language for --translate (default: en)")

    args = parser.parse_args(argv)

    if args.about:
        print(f"{Fore.CYAN}CULTURA{Style.RESET_ALL}")
        print("  Festivals, rituals and traditions of Northeast India, with translation")
        print(f"  {Fore.GREEN}Version   : {__version__}{Style.RESET_ALL}")
        print(f"  {Fore.GREEN}Developer : {__author__}{Style.RESET_ALL}")
        print(f"  {Fore.BLUE}Powered by: {__powered_by__}{Style.RESET_ALL}")
        print(f"\n  Run {Fore.YELLOW}cultura{Style.RESET_ALL} to start the interactive assistant.")
        return 0

    if args.translate is not None:
        return _one_shot_translate(args.translate, args.target, args.source)

    if args.ask is not None:
        return _one_shot_ask(args.ask)

    cli = CulturaCLI()
    try:
        cli.run()
    except CulturaError as e:
        print(f"{Fore.RED}Fatal error: {e}{Style.RESET_ALL}")
        logging.exception("Fatal error")
        sys.exit(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())
