from fastapi.testclient import TestClient
from app.main import app

with TestClient(app) as client:
    print('ROOT:')
    print(client.get('/').json())

    print('\nHEALTH:')
    print(client.get('/health').json())

    print('\nCITY PULSE:')
    print(client.get('/city-pulse').json())

    print('\nSUPPORT alert-003:')
    resp = client.post('/alerts/alert-003/support')
    print(resp.status_code, resp.json())

    print('\nSUPPORT alert-001 (already high):')
    resp = client.post('/alerts/alert-001/support')
    print(resp.status_code, resp.json())

    print('\nMAP MARKERS:')
    print([m['id'] for m in client.get('/map/markers').json()])
