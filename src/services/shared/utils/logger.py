from aws_lambda_powertools import Logger

SAFARI_SERVICE = "safari-service"


def get_logger(service_name: str = SAFARI_SERVICE) -> Logger:
    """サービス名付きの構造化ロガーを返す

    同じ service_name のロガーは内部で同じ logging.Logger を共有する。
    """
    return Logger(service=service_name)
