"""
初始化示例数据
向数据库写入几条钱包持有人记录, 便于本地调试
"""
import asyncio

from wallet_registry.infrastructure.database.session import dispose_engine, get_session, init_db
from wallet_registry.modules.wallet_owners import WalletOwnerDuplicateError, WalletOwnerService

SAMPLE_OWNERS = [
    {"name": "علي أحمد", "idCard": "100200300", "walletNumber": "W-0001", "phone": "0912345678"},
    {"name": "سارة محمد", "idCard": "100200301", "walletNumber": "W-0002"},
    {"name": "Omar Hassan", "idCard": "100200302", "walletNumber": "W-0003", "phone": "0923456789"},
]


async def create_sample_owners():
    """写入示例持有人, 已存在的记录会被跳过"""
    await init_db()

    async for db in get_session():
        service = WalletOwnerService.with_session(db)

        created = 0
        for payload in SAMPLE_OWNERS:
            try:
                await service.create_owner(payload)
            except WalletOwnerDuplicateError:
                print(f"已存在, 跳过: {payload['walletNumber']}")
                continue
            created += 1

        print("=" * 50)
        print(f"示例数据写入完成, 新增 {created} 条")
        print(f"当前记录总数: {await service.repository.count()}")
        print("=" * 50)

    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(create_sample_owners())
