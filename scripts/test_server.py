#!/usr/bin/env python3
"""Simple test client for the memory game server."""

import asyncio
import json
import httpx
import websockets

BASE_URL = "http://localhost:8000"


async def test_health():
    """Test health endpoint."""
    async with httpx.AsyncClient() as client:
        response = await client.get(f"{BASE_URL}/api/health")
        print(f"Health check: {response.json()}")
        return response.status_code == 200


async def test_create_session():
    """Test session creation."""
    async with httpx.AsyncClient() as client:
        response = await client.post(
            f"{BASE_URL}/api/sessions",
            json={"symbols": ["A", "B", "C"], "revert_delay_seconds": 0.5},
        )
        print(f"Session created: {response.json()}")
        return response.json()


def plan_moves(state: dict) -> list[int]:
    """One deliberate mismatch, then every pair in order."""
    positions: dict[str, list[int]] = {}
    for i, card in enumerate(state["cards"]):
        positions.setdefault(card["content"], []).append(i)

    pairs = list(positions.values())
    moves = [pairs[0][0], pairs[1][0]]
    for first, second in pairs:
        moves.extend([first, second])
    return moves


async def test_websocket(session_id: str):
    """Test WebSocket connection and game flow."""
    uri = f"ws://localhost:8000/ws/{session_id}"

    print(f"\nConnecting to {uri}...")

    async with websockets.connect(uri) as ws:
        moves: list[int] = []
        waiting_revert = False

        while True:
            try:
                message = await asyncio.wait_for(ws.recv(), timeout=10.0)
            except asyncio.TimeoutError:
                print("Timeout waiting for message")
                break

            data = json.loads(message)
            event_type = data.get("type", "unknown")
            print(f"[{event_type}]")

            if event_type == "connection_ack":
                print(f"  Joined session {data.get('session_id')}")

            elif event_type == "game_state":
                state = data.get("state", {})
                print(f"  Score: {state.get('score')}  Moves: {state.get('moves')}")
                if not moves and state.get("moves") == 0 and state.get("pending_first_selection") is None:
                    moves = plan_moves(state)
                if state.get("game_over"):
                    break
                if moves and not waiting_revert:
                    index = moves.pop(0)
                    await ws.send(json.dumps({"type": "select_card", "index": index}))
                    print(f"  -> Sent: select {index}")

            elif event_type == "mismatch":
                print(f"  Mismatch, flipping back in {data.get('revert_in_seconds')}s")
                waiting_revert = True

            elif event_type == "cards_reverted":
                waiting_revert = False

            elif event_type == "game_over":
                print(f"  Game over! Score {data.get('score')} in {data.get('moves')} moves")

            elif event_type == "error":
                print(f"  ERROR: {data.get('message')}")


async def main():
    """Run tests."""
    print("=" * 60)
    print("Memory Server Test Client")
    print("=" * 60)

    print("\n1. Testing health endpoint...")
    if not await test_health():
        print("Server not running. Start with: python -m memory_server.main")
        return

    print("\n2. Creating session...")
    session = await test_create_session()
    session_id = session.get("session_id")

    if not session_id:
        print("Failed to create session")
        return

    print("\n3. Testing WebSocket game flow...")
    await test_websocket(session_id)

    print("\n" + "=" * 60)
    print("Tests complete!")


if __name__ == "__main__":
    asyncio.run(main())
