#!/usr/bin/env python3
"""
Watch the luminaire SSE feed from a running API.

Usage:
    python script/watch_luminaire_events.py [base_url] [max_events]
"""

import asyncio
import json
import sys

import httpx


async def watch_luminaire_events(*, base_url: str, max_events: int) -> None:
    url = f'{base_url}/api/luminaires/automation/events'

    print(f'🔗 Connecting to SSE stream: {url}')
    print('=' * 80)

    async with httpx.AsyncClient(timeout=None) as client:
        async with client.stream('GET', url) as response:
            print(f'✅ Connected! Status: {response.status_code}')
            print('📊 Receiving luminaire events (Ctrl+C to stop)...')
            print('=' * 80)

            event_count = 0
            event_name = ''
            async for line in response.aiter_lines():
                if line.startswith('event: '):
                    event_name = line[len('event: ') :]
                    continue
                if not line.startswith('data: '):
                    continue

                event_count += 1
                try:
                    payload = json.loads(line[len('data: ') :])
                except json.JSONDecodeError:
                    print(f'⚠️  Event #{event_count}: Invalid JSON')
                    continue

                if event_name == 'initial_state':
                    print(f'📦 Event #{event_count}: initial_state {payload["allStates"]}')
                elif event_name == 'state_change':
                    state = 'on' if payload['isOn'] else 'off'
                    print(f'💡 Event #{event_count}: luminaire {payload["luminariaId"]} {state}')
                else:
                    print(f'💓 Event #{event_count}: {event_name} at {payload["timestamp"]}')

                if max_events and event_count >= max_events:
                    print('\n' + '=' * 80)
                    print(f'🎉 Done! Received {event_count} events')
                    break


if __name__ == '__main__':
    base_url = sys.argv[1] if len(sys.argv) > 1 else 'http://localhost:8000'
    max_events = int(sys.argv[2]) if len(sys.argv) > 2 else 0
    try:
        asyncio.run(watch_luminaire_events(base_url=base_url, max_events=max_events))
    except KeyboardInterrupt:
        print('\n🛑 Stopped by user')
