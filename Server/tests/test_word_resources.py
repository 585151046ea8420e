import pytest

from wordscramble.config import TestingConfig, get_word_statistics
from wordscramble.services import (
    EmptyWordPool, RandomSelector, ResourceLoadError, StaticDictionary, WordValidator,
    get_game_service, initialize_game_service, load_word_pool
)


def test_bundled_word_pool_loads():
    pool = load_word_pool()
    assert 'teacups' in pool
    assert all(word and word == word.strip().lower() for word in pool)


def test_blank_lines_are_filtered(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('Teacup\n\n  planet \n\n', encoding='utf-8')
    assert load_word_pool(str(path)) == ['teacup', 'planet']


def test_blank_lines_kept_when_asked(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('teacup\n', encoding='utf-8')
    assert load_word_pool(str(path), skip_blank=False) == ['teacup', '']


def test_missing_word_pool_raises_resource_load_error(tmp_path):
    with pytest.raises(ResourceLoadError):
        load_word_pool(str(tmp_path / 'missing.txt'))


def test_resource_load_error_is_an_os_error():
    assert issubclass(ResourceLoadError, OSError)
    assert issubclass(EmptyWordPool, ValueError)


def test_selector_refuses_empty_pool():
    with pytest.raises(EmptyWordPool):
        RandomSelector(seed=1).pick([])


def test_selector_picks_from_pool():
    pool = ['teacup', 'planet', 'garden']
    selector = RandomSelector(seed=3)
    assert all(selector.pick(pool) in pool for _ in range(20))


def test_wordfreq_dictionary_knows_common_words():
    dictionary = StaticDictionary.from_wordfreq(['en'])
    assert dictionary.is_real_word('cup', 'en')
    assert dictionary.is_real_word('Cape', 'en')
    assert not dictionary.is_real_word('qzxvw', 'en')


def test_unknown_locale_rejects_every_word():
    dictionary = StaticDictionary({'en': ['cup']})
    assert not dictionary.is_real_word('cup', 'de')
    assert dictionary.locales == {'en'}


def test_missing_dictionary_raises(tmp_path):
    with pytest.raises(ResourceLoadError):
        StaticDictionary.from_files(str(tmp_path), ['en'])


def test_dictionary_from_directory(tmp_path):
    (tmp_path / 'dictionary_fr.txt').write_text('chat\nchien\n', encoding='utf-8')
    dictionary = StaticDictionary.from_files(str(tmp_path), ['fr'])
    assert dictionary.is_real_word('chat', 'fr')
    assert not dictionary.is_real_word('cat', 'fr')


def test_word_statistics():
    stats = get_word_statistics(['teacup', 'tea'])
    assert stats['total_words'] == 2
    assert stats['longest_word'] == 6
    assert get_word_statistics([]) == {'total_words': 0}


def test_wordfreq_dictionary_accepts_words_from_absolute():
    validator = WordValidator(StaticDictionary.from_wordfreq(['en']))
    for word in ('table', 'stable', 'bolt', 'tube', 'lute'):
        assert validator.validate(word, 'absolute', []).accepted, word
    assert not validator.validate('tabs', 'absolute', ['tabs']).accepted
    assert not validator.validate('qzxvw', 'absolute', []).accepted


def test_missing_word_pool_path_fails_service_initialization(tmp_path):
    class MissingPoolConfig(TestingConfig):
        WORD_POOL_PATH = str(tmp_path / 'missing.txt')

    previous = get_game_service()
    with pytest.raises(ResourceLoadError):
        initialize_game_service(MissingPoolConfig, dictionary=StaticDictionary({'en': []}))
    assert get_game_service() is previous


def test_missing_dictionary_dir_fails_service_initialization(tmp_path):
    class MissingDictionaryConfig(TestingConfig):
        DICTIONARY_DIR = str(tmp_path)

    with pytest.raises(ResourceLoadError):
        initialize_game_service(MissingDictionaryConfig, word_pool=['teacup'])
