#!/usr/bin/env python3
"""Validation script to check if all imports work correctly."""

import sys


def validate_imports():
    """Test that all modules can be imported."""
    print("Validating imports...")

    errors = []

    try:
        from github_task_server import server
        print("✓ Main server module")
    except Exception as e:
        errors.append(f"✗ Main server: {e}")

    try:
        from github_task_server import config, dispatcher
        print("✓ Config and dispatcher modules")
    except Exception as e:
        errors.append(f"✗ Config/dispatcher: {e}")

    try:
        from github_task_server.github import client, models, url_parser
        print("✓ GitHub modules")
    except Exception as e:
        errors.append(f"✗ GitHub modules: {e}")

    try:
        from github_task_server.task import formatter
        print("✓ Task formatter")
    except Exception as e:
        errors.append(f"✗ Task formatter: {e}")

    try:
        from github_task_server.utils import errors as error_types, logging_config, redact
        print("✓ Utility modules")
    except Exception as e:
        errors.append(f"✗ Utilities: {e}")

    try:
        from github_task_server.dispatcher import GET_ISSUE_TASK_TOOL
        assert GET_ISSUE_TASK_TOOL.name == "get_issue_task"
        print("✓ get_issue_task tool definition")
    except Exception as e:
        errors.append(f"✗ Tool definition: {e}")

    if errors:
        print("\n❌ Validation failed with errors:")
        for error in errors:
            print(f"  {error}")
        return False
    else:
        print("\n✅ All validations passed!")
        return True


def check_dependencies():
    """Check if required dependencies are installed."""
    print("\nChecking dependencies...")

    required = [
        "mcp",
        "httpx",
        "pydantic",
        "dotenv"
    ]

    missing = []

    for package in required:
        try:
            __import__(package)
            print(f"✓ {package}")
        except ImportError:
            missing.append(package)
            print(f"✗ {package} - NOT INSTALLED")

    if missing:
        print(f"\n❌ Missing packages: {', '.join(missing)}")
        print("Install with: pip install -e .")
        return False
    else:
        print("\n✅ All dependencies installed!")
        return True


def main():
    """Run all validations."""
    print("=" * 60)
    print("GitHub Task MCP Server - Validation Script")
    print("=" * 60)

    deps_ok = check_dependencies()
    print()

    if deps_ok:
        imports_ok = validate_imports()

        if imports_ok:
            print("\n" + "=" * 60)
            print("🎉 Ready to use!")
            print("=" * 60)
            print("\nNext steps:")
            print("  1. Set GITHUB_AUTH_TOKEN environment variable (optional)")
            print("  2. Run: github-task-mcp")
            return 0
        else:
            return 1
    else:
        return 1


if __name__ == "__main__":
    sys.exit(main())
