"""
Boot Check
قبل از deploy: تنظیمات بارگذاری شوند، app import شود و مسیرهای اشتراک ثبت شده باشند
"""

import traceback

REQUIRED_PATHS = ("/subscriptions", "/health")


def list_routes(app) -> list:
    """مسیرها از OpenAPI خوانده می‌شوند (routerهای تو در تو هم شامل می‌شوند)"""
    paths = app.openapi().get("paths", {})
    return sorted(
        f"{method.upper()} {path}"
        for path, operations in paths.items()
        for method in operations
    )


def main():
    print("=== BOOT CHECK ===")

    from swap_split.core.config import async_database_url, get_settings

    settings = get_settings()
    driver = async_database_url(settings.database_url).split("://", 1)[0]
    print("Database driver:", driver)
    print("DB pool:", f"{settings.db_pool_size}+{settings.db_max_overflow}")
    print("LOG_LEVEL:", settings.log_level)
    print("AUTO_CREATE_TABLES:", settings.auto_create_tables)
    print(
        "Rate limit:",
        settings.subscribe_rate_limit if settings.rate_limit_enabled else "disabled",
    )

    try:
        print("\n--- Trying to import swap_split.api.main ---")
        from swap_split.api.main import app
        print("✅ Imported swap_split.api.main:app OK")
    except Exception:
        print("❌ Import failed:")
        traceback.print_exc()
        raise

    routes = list_routes(app)
    print("Routes:", routes)

    registered = {route.split(" ", 1)[1] for route in routes}
    missing = [p for p in REQUIRED_PATHS if p not in registered]
    if missing:
        raise SystemExit(f"❌ Missing routes: {missing}")


if __name__ == "__main__":
    main()
