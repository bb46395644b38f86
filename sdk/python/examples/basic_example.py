#!/usr/bin/env python3
"""
etcdkv Python客户端基础示例
"""

import asyncio
import sys

from etcdkv_client import ClientConfig, EtcdKVError, connect


async def basic_operations_example(config):
    """基本操作示例"""
    print("=== Basic Operations Example ===")

    # 使用上下文管理器自动断开
    async with await connect(config=config) as session:
        previous = await session.range("foo").put("bar")
        print(f"PUT foo = bar (previous: {previous})")

        print(f"GET foo = {await session.range('foo').get()}")

        deleted = await session.range("foo").delete()
        print(f"DELETE foo ({deleted} deleted)")

        # delete 之后需要重新创建范围句柄
        print(f"GET foo after delete = {await session.range('foo').get()}")


async def range_operations_example(config):
    """范围操作示例"""
    print("\n=== Range Operations Example ===")

    async with await connect(config=config) as session:
        for i in range(5):
            await session.range(f"user:100{i}").put(f"name-{i}")

        # [user:1001, user:1004)
        for kv in await session.range("user:1001", "user:1004").get_kvs():
            print(f"  {kv.key} = {kv.value} (mod_revision={kv.mod_revision})")

        await session.range("user:", "user;").delete()


async def watch_example(config):
    """订阅示例"""
    print("\n=== Watch Example ===")

    async with await connect(config=config) as session:
        async with await session.watch("foo") as watch:
            async def consume():
                async for event in watch.events():
                    print(f"  {event}")
                    if event.value == "done":
                        return

            consumer = asyncio.create_task(consume())
            await session.range("foo").put("first")
            await session.range("foo").put("done")
            await asyncio.wait_for(consumer, timeout=5)
        await session.range("foo").delete()


async def cluster_example(config):
    """集群信息示例"""
    print("\n=== Cluster Example ===")

    async with await connect(config=config) as session:
        for member in await session.cluster().members():
            print(f"  {member.ID:x} {member.name} {list(member.clientURLs)}")


async def main():
    """主函数"""
    endpoint = sys.argv[1] if len(sys.argv) > 1 else "http://127.0.0.1:2379"
    config = ClientConfig(endpoint=endpoint, connection_timeout=5.0, request_timeout=10.0)

    try:
        await basic_operations_example(config)
        await range_operations_example(config)
        await watch_example(config)
        await cluster_example(config)
    except EtcdKVError as e:
        print(f"Error: {e}")
        print(f"Make sure an etcd server is running on {endpoint}")


if __name__ == "__main__":
    asyncio.run(main())
