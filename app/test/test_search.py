from core.search import ByCategory, ByCreator, General, parse_search


def test_empty_search_is_no_search():
    assert parse_search('') is None
    assert parse_search('   ') is None
    assert parse_search(None) is None


def test_general_search_is_trimmed_and_lowered():
    assert parse_search('  Clean WATER ') == General('clean water')


def test_prefixes():
    assert parse_search('category: Medical') == ByCategory('medical')
    assert parse_search('CREATOR:Priya ') == ByCreator('priya')


def test_prefix_must_lead():
    # "category:" in the middle is ordinary text
    assert parse_search('books category:education') == General('books category:education')


def test_general_matches_any_field(make_project):
    project = make_project(1, title='Clean Water', description='wells for schools', category='education')

    assert General('water').matches(project)
    assert General('wells').matches(project)
    assert General('test creator').matches(project)
    assert General('educ').matches(project)
    assert not General('cricket').matches(project)


def test_category_search_ignores_title(make_project):
    project = make_project(1, title='Medical supplies', category='community')

    assert not ByCategory('medical').matches(project)
    assert ByCategory('commun').matches(project)


def test_creator_search_only_looks_at_creator(make_project):
    project = make_project(1, title='Priya helps')

    assert not ByCreator('priya').matches(project)
    assert ByCreator('test').matches(project)
