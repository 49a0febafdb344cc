import asyncio
import sys
import threading
import time
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from config.config import Config
from context.session_context import QueryContext
from orchestrator.core import QueryGateway
from orchestrator.errors import QueryServiceError


def show_loading_animation(stop_event: threading.Event) -> None:
    """
    Show a loading animation in the console.

    Args:
        stop_event: A threading.Event that will be set to stop the animation
    """
    while not stop_event.is_set():
        for char in '|/-\\':
            if stop_event.is_set():
                break
            sys.stdout.write(f'\r\033[93mLoading {char}\033[0m')
            sys.stdout.flush()
            time.sleep(0.1)

    sys.stdout.write('\r' + ' ' * 20 + '\r')
    sys.stdout.flush()


def run_with_animation(coro):
    """Run a coroutine to completion while the loading animation spins."""
    stop_animation = threading.Event()
    loading_thread = threading.Thread(target=show_loading_animation, args=(stop_animation,))
    loading_thread.daemon = True
    loading_thread.start()
    try:
        return asyncio.run(coro)
    finally:
        stop_animation.set()
        loading_thread.join()


def print_items(items) -> None:
    if not items:
        print("\nNo results.\n")
        return
    print()
    for item in items:
        print(f"[{item.source}] {item.title}")
        print(f"  {item.content}\n")


def print_help() -> None:
    print("\n=== Available Commands ===")
    print("<text>              - Query data for <text>")
    print("provider [id]       - Switch provider (toggles when no id is given)")
    print("populate <text>     - Force population for <text>")
    print("records             - Show every result returned this session")
    print("stats               - Show resolver statistics")
    print("reset               - Forget cached and stored data")
    print("exit/quit           - Exit the program\n")


def main():
    config = Config()
    if not config.validate():
        print("Error: invalid configuration, see logs for details.")
        return

    try:
        context = QueryContext.from_config(config)
    except (ValueError, QueryServiceError) as e:
        print(f"Error initializing providers: {str(e)}")
        return

    gateway = QueryGateway(context)
    providers = context.registry.provider_ids()
    provider = context.default_provider
    active_query = None

    print("\n=== Tiered Query ===")
    print(f"Providers: {', '.join(providers)} (current: {provider})")
    print("Type 'help' for commands, 'exit' to quit\n")

    while True:
        try:
            user_input = input(f"[{provider}] Query: ").strip()

            if not user_input:
                continue

            command, _, argument = user_input.partition(' ')
            command = command.lower()
            argument = argument.strip()

            if command in ('exit', 'quit'):
                print("\nGoodbye!")
                break

            if command == 'help':
                print_help()
                continue

            if command == 'records':
                print_items(gateway.records())
                print(f"[{len(context.records)} records]\n")
                continue

            if command == 'stats':
                for name, value in context.resolver.stats.to_dict().items():
                    print(f"{name:>12}: {value}")
                print()
                continue

            if command == 'reset':
                context.reset()
                active_query = None
                print("\nCache and native store cleared.\n")
                continue

            if command == 'provider':
                if argument:
                    if argument.lower() not in context.registry:
                        print(f"\nUnknown provider '{argument}'. Choose from: {', '.join(providers)}\n")
                        continue
                    provider = argument.lower()
                else:
                    provider = providers[(providers.index(provider) + 1) % len(providers)]
                print(f"\nProvider switched to {provider}\n")
                # provider changes re-issue the active query
                if active_query:
                    print_items(run_with_animation(gateway.read(active_query, provider)))
                continue

            if command == 'populate':
                if not argument:
                    print("\nUsage: populate <text>\n")
                    continue
                result = run_with_animation(gateway.populate(argument, provider))
                status = "OK" if result.success else "FAILED"
                print(f"\n{status}: {result.message}\n")
                continue

            active_query = user_input
            print_items(run_with_animation(gateway.read(user_input, provider)))

        except KeyboardInterrupt:
            print("\nExiting...")
            break
        except QueryServiceError as e:
            print(f"\nError: {str(e)}\n")
            continue

    if len(context.records) > 0:
        print(f"\n=== Session ===\n{len(context.records)} records returned")


if __name__ == "__main__":
    main()
