
def test_health_check(client):
    response = client.get('/health')
    assert response.status_code == 200
    json_data = response.get_json()
    assert json_data.get('status') == 'ok'


def test_security_and_expose_headers(client):
    resp = client.get('/health', headers={'Origin': 'http://shop.example'})
    assert resp.headers['X-Content-Type-Options'] == 'nosniff'
    assert resp.headers['X-Frame-Options'] == 'DENY'
    exposed = resp.headers['Access-Control-Expose-Headers']
    assert 'X-Request-ID' in exposed
    assert 'traceparent' in exposed


def test_apispec_lists_storefront_routes(client):
    resp = client.get('/apispec.json')
    assert resp.status_code == 200
    spec = resp.get_json()
    paths = spec['paths']
    assert 'post' in paths['/api/v1/checkout']
    assert 'get' in paths['/api/v1/products/{product_id}/recommendations']
    assert not any(p.startswith('/__') for p in paths)
    assert {t['name'] for t in spec['tags']} >= {'Products', 'Cart', 'Checkout'}
