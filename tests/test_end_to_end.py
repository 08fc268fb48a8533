"""End-to-end tests: client -> gateway -> task service -> store, in-process."""

import asyncio
from contextlib import asynccontextmanager

import httpx
import pytest
import pytest_asyncio

from tasklist.dependencies import get_http_client, get_task_store
from tasklist.gateway.main import app as gateway_app
from tasklist.tasks.main import app as task_app


@asynccontextmanager
async def wired(store):
    """Point the gateway at the task service app and the service at ``store``."""
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=task_app)) as backend:
        task_app.dependency_overrides[get_task_store] = lambda: store
        gateway_app.dependency_overrides[get_http_client] = lambda: backend
        try:
            async with httpx.AsyncClient(
                transport=httpx.ASGITransport(app=gateway_app),
                base_url="http://gateway",
            ) as client:
                yield client
        finally:
            task_app.dependency_overrides.clear()
            gateway_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def gateway(store):
    async with wired(store) as client:
        yield client


@pytest_asyncio.fixture
async def broken_gateway(unreachable_store):
    async with wired(unreachable_store) as client:
        yield client


class TestEndToEnd:
    
    @pytest.mark.asyncio
    async def test_add_list_delete_scenario(self, gateway):
        """Add "buy milk", see it listed, delete it, see an empty list."""
        response = await gateway.post("/add", json={"task": "buy milk"})
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == "Task added"
        
        response = await gateway.get("/get")
        assert response.status_code == 200
        assert response.json() == ["buy milk"]
        
        response = await gateway.request("DELETE", "/delete", json={"task": "buy milk"})
        assert response.status_code == 200
        assert response.json() == "Task deleted"
        
        response = await gateway.get("/get")
        assert response.json() == []
    
    @pytest.mark.asyncio
    async def test_duplicates_removed_together(self, gateway):
        for task in ["a", "b", "a"]:
            await gateway.post("/add", json={"task": task})
        assert (await gateway.get("/get")).json() == ["a", "b", "a"]
        
        await gateway.request("DELETE", "/delete", json={"task": "a"})
        
        assert (await gateway.get("/get")).json() == ["b"]
    
    @pytest.mark.asyncio
    async def test_delete_absent_value_is_noop(self, gateway):
        await gateway.post("/add", json={"task": "keep"})
        
        response = await gateway.request("DELETE", "/delete", json={"task": "ghost"})
        
        assert response.status_code == 200
        assert response.json() == "Task deleted"
        assert (await gateway.get("/get")).json() == ["keep"]
    
    @pytest.mark.asyncio
    async def test_concurrent_adds_both_land(self, gateway):
        """Two concurrent adds succeed and each value appears exactly once."""
        responses = await asyncio.gather(
            gateway.post("/add", json={"task": "a"}),
            gateway.post("/add", json={"task": "b"}),
        )
        assert [r.status_code for r in responses] == [200, 200]
        
        tasks = (await gateway.get("/get")).json()
        
        assert len(tasks) == 2
        assert tasks.count("a") == 1
        assert tasks.count("b") == 1
    
    @pytest.mark.asyncio
    async def test_missing_body_surfaces_as_gateway_500(self, gateway):
        response = await gateway.post("/add")
        
        assert response.status_code == 500
        assert "returned error 500" in response.text
        assert (await gateway.get("/get")).json() == []
    
    @pytest.mark.asyncio
    async def test_store_down_surfaces_as_gateway_500(self, broken_gateway):
        """A storage failure behind the gateway is an opaque gateway 500."""
        responses = [
            await broken_gateway.get("/get"),
            await broken_gateway.post("/add", json={"task": "a"}),
            await broken_gateway.request("DELETE", "/delete", json={"task": "a"}),
        ]
        
        for response in responses:
            assert response.status_code == 500
            assert "returned error 500" in response.text
            assert "Task store" not in response.text
