class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class PersistenceException(Exception):
    """永続化層（ストア）への書き込み・読み込みに失敗した場合"""

    pass


class CatalogUnavailableException(PersistenceException):
    """カタログが読み込めない場合（破損・接続不可）

    「カタログが空」とは区別して扱う。
    """

    pass
