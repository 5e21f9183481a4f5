from app.community_service import generate_community_posts, toggle_empathy, POST_SYMPTOMS


def test_generates_requested_number_of_posts():
    posts = generate_community_posts(count=20, seed=1)
    assert len(posts) == 20
    assert len({p.post_id for p in posts}) == 20


def test_posts_are_well_formed():
    for post in generate_community_posts(count=30, seed=2):
        assert 1 <= len(post.symptoms) <= 3
        assert set(post.symptoms) <= set(POST_SYMPTOMS)
        assert post.weather.condition in ("sunny", "cloudy", "rainy")
        assert -5 <= post.weather.pressure_change <= 5
        assert 0 <= post.empathy_count < 50


def test_seed_is_reproducible():
    assert generate_community_posts(count=5, seed=9) == generate_community_posts(count=5, seed=9)


def test_toggle_empathy():
    post = generate_community_posts(count=1, seed=4)[0]
    post.is_empathized = False
    post.empathy_count = 3

    toggle_empathy(post)
    assert post.is_empathized
    assert post.empathy_count == 4

    toggle_empathy(post)
    assert not post.is_empathized
    assert post.empathy_count == 3
