"""
Cache — read-through field caching.

Key concepts:
- Context = store + logger + default expiry (configure once at startup)
- Marshal = one key, read() decides hit / miss / force
- Deferred resolvers (LazyCoroResult, coroutines) persist once they complete
"""

from kungfu import Ok, Error

from fieldcache import cache as C
from fieldcache import lift as L
from examples._infra import banner, run, FakeDb


db = FakeDb()


# ═══════════════════════════════════════════════════════════════════════════════
# 1. CONTEXT IS GLOBAL — configure once, every marshal picks it up
# ═══════════════════════════════════════════════════════════════════════════════

C.configure(store=C.MemoryStore(), expiry=600)


# ═══════════════════════════════════════════════════════════════════════════════
# 2. FIELD RESOLVERS — plain and async
# ═══════════════════════════════════════════════════════════════════════════════


@C.cached(lambda uid: C.make_key("User", uid, "profile"), expiry=60)
async def resolve_profile(uid: int) -> dict[str, str]:
    user = await db.fetch_user(uid)
    return {"name": user.name, "email": user.email}


async def main() -> None:
    banner("Cache: Marshal read / write")

    print("\n1. First read (miss → resolve → write):")
    user = C.Marshal["user:42"].read(None, lambda: db.get_user(42))
    print(f"   → {user.name} (queries={db.queries})")

    print("\n2. Second read (hit → stored document, no resolve):")
    doc = C.Marshal["user:42"].read(None, lambda: db.get_user(42))
    print(f"   → {doc} (queries={db.queries})")

    print("\n3. Forced read (always resolve, overwrite):")
    user = C.Marshal["user:42"].read(None, lambda: db.get_user(42), force=True)
    print(f"   → {user.name} (queries={db.queries})")

    banner("Cache: deferred resolvers")

    print("\n4. LazyCoroResult resolver (persisted after completion):")
    result = await C.Marshal["user:43"].read({"expiry": 30}, L.lazy(lambda: db.fetch_user(43)))
    match result:
        case Ok(u):
            print(f"   → {u.name}")
        case Error(e):
            print(f"   error: {e}")

    print("\n5. Failing LazyCoroResult (nothing persisted):")
    result = await C.Marshal["user:99"].read(None, L.lazy(lambda: db.fetch_user(99)))
    match result:
        case Ok(u):
            print(f"   → {u.name}")
        case Error(e):
            print(f"   error: {e}")

    print("\n6. Cached async field, twice:")
    for _ in range(2):
        profile = await C.settle(resolve_profile(42))
        print(f"   → {profile}")

    print("\nDone!")


if __name__ == "__main__":
    run(main)
