"""Registros imutáveis por canal e registro canônico de localização.

Cada canal produz seu próprio registro tipado. O Normalizer converte
qualquer um deles em CanonicalLocationRecord (cópia de valores, sem
referência ao registro de origem).

Campos opcionais usam None para ausência; nunca valores sentinela.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime  # noqa: TC003 - usado em runtime pelas anotações
from typing import TypeAlias

from aml_decoder.constants.aml import (
    ActivationSource,
    AmlVersion,
    Origin,
    PositioningSource,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class SmsFields:
    """Campos comuns aos dois formatos SMS (texto e data SMS).

    Attributes:
        version: Versão do protocolo (header A"ML)
        latitude: Latitude WGS84 em graus
        longitude: Longitude WGS84 em graus
        accuracy: Raio da área de localização em metros
        time_of_positioning: Instante do fix (UTC)
        positioning_method: Código de uma letra do método (G, W, C, F, U...)
        confidence: Nível de confiança em porcentagem (0-100)
        imsi: Identificador do SIM
        imei: Identificador do aparelho
        network_mcc: MCC da rede usada na chamada
        network_mnc: MNC da rede usada na chamada
        message_length: Comprimento declarado da mensagem (v1)
        emergency_number: Número de emergência discado (v2)
        beginning_of_call: Início da chamada (v2)
        altitude: Altitude em metros (v2)
        vertical_accuracy: Precisão vertical em metros (v2)
        home_mcc: MCC da rede de origem (v2)
        home_mnc: MNC da rede de origem (v2)
        language: Tags de idioma BCP 47 (v2)
    """

    version: AmlVersion
    latitude: float
    longitude: float
    accuracy: float
    time_of_positioning: datetime
    positioning_method: str
    confidence: int | None = None
    imsi: str | None = None
    imei: str | None = None
    network_mcc: int | None = None
    network_mnc: int | None = None
    message_length: int | None = None
    emergency_number: str | None = None
    beginning_of_call: datetime | None = None
    altitude: float | None = None
    vertical_accuracy: float | None = None
    home_mcc: int | None = None
    home_mnc: int | None = None
    language: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SmsTextRecord(SmsFields):
    """Registro de SMS texto (corpo `key=value;...`)."""


@dataclass(frozen=True, slots=True, kw_only=True)
class SmsBinaryRecord(SmsFields):
    """Registro de data SMS (payload empacotado em septetos).

    Attributes:
        payload_octets: Tamanho do buffer decodificado em bytes
    """

    payload_octets: int


@dataclass(frozen=True, slots=True, kw_only=True)
class HttpsRecord:
    """Registro do canal HTTPS (form url-encoded).

    Attributes:
        version: Versão do protocolo (`v`)
        latitude: Latitude WGS84 em graus
        longitude: Longitude WGS84 em graus
        accuracy: Precisão horizontal em metros
        location_time: Instante do fix (UTC)
        location_source: Código do método em minúsculas (gps, wifi, cell...)
        certainty: Certeza em porcentagem (0-100)
        confidence: Confiança como fração (0.0-1.0)
        device_number: Número do aparelho (pode faltar)
        emergency_number: Número de emergência discado
        activation_source: Origem da ativação (call ou sms)
        beginning_of_call: Início da chamada (UTC)
        altitude: Altitude em metros
        floor: Rótulo do andar (pode ser não numérico)
        vertical_accuracy: Precisão vertical em metros
        bearing: Direção em graus (0-360)
        speed: Velocidade em m/s
        device_model: Modelo do aparelho
        imsi: Identificador do SIM
        imei: Identificador do aparelho
        iccid: Identificador do cartão SIM (ICCID)
        languages: Tags BCP 47 separadas por vírgula
        signature: Valor bruto do parâmetro `hmac`
    """

    version: AmlVersion
    latitude: float
    longitude: float
    accuracy: float
    location_time: datetime
    location_source: str
    certainty: int | None = None
    confidence: float | None = None
    device_number: str | None = None
    emergency_number: str | None = None
    activation_source: ActivationSource | None = None
    beginning_of_call: datetime | None = None
    altitude: float | None = None
    floor: str | None = None
    vertical_accuracy: float | None = None
    bearing: float | None = None
    speed: float | None = None
    device_model: str | None = None
    imsi: str | None = None
    imei: str | None = None
    iccid: str | None = None
    languages: str | None = None
    signature: str | None = None


ChannelRecord: TypeAlias = SmsTextRecord | SmsBinaryRecord | HttpsRecord


@dataclass(frozen=True, slots=True, kw_only=True)
class CanonicalLocationRecord:
    """Registro de localização unificado, independente do canal."""

    origin: Origin
    version: AmlVersion
    latitude: float
    longitude: float
    accuracy: float
    timestamp: datetime
    positioning_source: PositioningSource
    confidence: int | None = None
    device_number: str | None = None
    imei: str | None = None
    imsi: str | None = None
    network_mcc: int | None = None
    network_mnc: int | None = None
    home_mcc: int | None = None
    home_mnc: int | None = None
    emergency_number: str | None = None
    activation_source: ActivationSource | None = None
    beginning_of_call: datetime | None = None
    altitude: float | None = None
    vertical_accuracy: float | None = None
    bearing: float | None = None
    speed: float | None = None
    floor: str | None = None
    device_model: str | None = None
    iccid: str | None = None
    language: str | None = None

    @property
    def device_identifier(self) -> str | None:
        """Primeiro identificador presente: número, IMEI ou IMSI."""
        return self.device_number or self.imei or self.imsi
