"""Read-only views over the room store for the status and listing endpoints."""


def room_summaries(store, now):
    rooms = sorted(store.snapshot(), key=lambda r: r.created_at)
    return [room.summary(now) for room in rooms]


def room_listing(store, now):
    summaries = room_summaries(store, now)
    return {'total': len(summaries), 'rooms': summaries}


def status_report(store, connections, started_at, now):
    rooms = store.snapshot()
    return {
        'status': 'ok',
        'rooms': len(rooms),
        'players': len(connections),
        'members': sum(len(r.members) for r in rooms),
        'uptime': round(max(0.0, now - started_at), 3),
    }
