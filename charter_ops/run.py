#!/usr/bin/env python3
"""
Charter Operations Runner Script
Provides easy ways to run different parts of the system
"""
import argparse
import sys
import subprocess
from charter_ops.config import config
from charter_ops.utils.exceptions import ConfigurationException

def run_web_server():
    """Run the web server"""
    if not config.validate():
        raise ConfigurationException("Invalid configuration, run `config` for details", error_code="INVALID_CONFIG")

    print("Starting Charter Operations Web Server...")
    print(f"Server will be available at: http://{config.app.host}:{config.app.port}")

    import uvicorn
    uvicorn.run(
        "charter_ops.web.app:app",
        host=config.app.host,
        port=config.app.port,
        reload=config.app.debug,
        log_level=config.logging.level.lower()
    )

def run_cli_simulation():
    """Run CLI walkthrough"""
    print("🎯 Running Charter Walkthrough...")
    from charter_ops.main import simulate_charter_day
    simulate_charter_day()

def seed_database():
    """Load demo staff and bookings into the configured database"""
    from charter_ops.database.repository import CharterRepository
    from charter_ops.database.seed import seed_demo_data
    print(f"🌱 Seeding {config.database.url}...")
    counts = seed_demo_data(CharterRepository())
    print(f"Seeded {counts['staff']} staff and {counts['bookings']} bookings")
    return True

def run_tests():
    """Run test suite"""
    print("🧪 Running Test Suite...")
    try:
        result = subprocess.run(["pytest", "-v"], capture_output=False)
        return result.returncode == 0
    except FileNotFoundError:
        print("❌ pytest not installed. Install with: pip install -e .[test]")
        return False

def validate_config():
    """Validate configuration"""
    print("🔧 Validating Configuration...")

    if config.validate():
        print("✅ Configuration is valid")
        print(f"🗄️  Database: {config.database.url}")
        print(f"🔁 Refetch interval: {config.charter.refetch_interval_seconds}s")
        print(f"🧭 Briefing lead: {config.charter.briefing_lead_minutes} min")
        return True
    else:
        print("❌ Configuration validation failed")
        print("⚠️  Check your environment variables and .env file")
        return False

def show_help():
    """Show help information"""
    print("""
Charter Operations - Yacht Experience & Crew Management

Available commands:

  web         Start the web server interface
  cli         Run the charter walkthrough against an in-memory store
  seed        Load demo staff and bookings into the configured database
  test        Run the test suite
  config      Validate configuration
  help        Show this help message

Examples:

  python -m charter_ops.run web
  python -m charter_ops.run cli
  python -m charter_ops.run config
""")

def main():
    parser = argparse.ArgumentParser(
        description="Charter Operations Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "command",
        choices=["web", "cli", "seed", "test", "config", "help"],
        help="Command to run"
    )

    if len(sys.argv) == 1:
        show_help()
        return

    args = parser.parse_args()

    print("Charter Operations - Yacht Experience & Crew Management")
    print("=" * 60)

    try:
        if args.command == "web":
            run_web_server()
        elif args.command == "cli":
            run_cli_simulation()
        elif args.command == "seed":
            success = seed_database()
            sys.exit(0 if success else 1)
        elif args.command == "test":
            success = run_tests()
            sys.exit(0 if success else 1)
        elif args.command == "config":
            success = validate_config()
            sys.exit(0 if success else 1)
        else:
            show_help()

    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
