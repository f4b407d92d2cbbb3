# upkit-x509

Helpers for building and reading the extensions of X.509 certificates, and a
parser for DER-encoded certificates. It works on top of the `cryptography`
library. Each helper converts to and from `cryptography`'s extension value
types with `to_cryptography` and `from_cryptography`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `upkit_x509.key_usage.KeyUsage`: an enum of the nine key usage bits.
  `index()` gives a bit's position, from 0 for `DIGITAL_SIGNATURE` to 8 for
  `DECIPHER_ONLY`. `to_cryptography` builds a `cryptography.x509.KeyUsage`
  from a collection of usages. `cryptography` raises `ValueError` if
  `ENCIPHER_ONLY` or `DECIPHER_ONLY` is given without `KEY_AGREEMENT`.
  `from_cryptography` returns the usages that are set, in bit order.
- `upkit_x509.basic_constraints.BasicConstraints`: a frozen dataclass created
  with `new_leaf()` or `new_ca(path_len)`. It has `is_leaf()`, `is_ca()` and
  `path_len()`. `path_len()` is always `None` for a leaf.
- `upkit_x509.extended_key_usage`:
  - `ExtendedKeyUsage` is an enum of well-known extended key usages. Each
    member's value is its OID as a tuple of integers.
  - `ExtendedKeyUsage.from_oid` accepts a dotted string, an
    `ObjectIdentifier` or a sequence of integers. It returns a
    `CustomExtendedKeyUsage` for an OID that is not in the enum.
- `upkit_x509.certificate_policies`:
  - `WellKnownCertificatePolicy` holds the OIDs of anyPolicy and of the
    CA/Browser Forum policies.
  - `CertificatePolicy` has three kinds. `OidPolicy` is an OID alone.
    `CspPolicy` is an OID with a CPS URI, which must be ASCII.
    `UserNoticePolicy` is an OID with an optional notice reference and
    explicit text. The explicit text is cut to 200 characters when encoded.
  - When reading, only the first qualifier of a policy is used. An
    unrecognised qualifier raises `ValueError`.
- `upkit_x509.key_identifier`:
  - `SubjectKeyIdentifier` and `AuthorityKeyIdentifier` hold only a key
    identifier.
  - `from_public_key` takes the raw public key bytes. The identifier is
    their SHA3-256 digest.
  - `AuthorityKeyIdentifier.from_issuers_subject_key_identifier` copies the
    issuer's identifier bytes.
- `upkit_x509.crl_distribution_points.CrlDistributionPoint`:
  - `to_cryptography(uri)` builds a single distribution point. It has no
    reasons and no CRL issuer, and the URI must be ASCII.
  - `from_cryptography` returns the URI of the first point that has no
    reasons and no CRL issuer. Among that point's URIs, the one that sorts
    first is chosen, so http(s) comes before ldap(s).
- `upkit_x509.extensions.Extensions`: collects extensions in the order they
  are added.
  - Basic Constraints is critical only for a CA.
  - Key Usage is always critical.
  - Certificate Policies, CRL Distribution Points, Authority and Subject Key
    Identifier and Extended Key Usage are not critical.
  - Adding an empty list of key usages, policies or extended key usages adds
    nothing.
  - `to_cryptography()` returns a `cryptography.x509.Extensions`, or `None`
    when no extension was added.
- `upkit_x509.parse.CertificateParser`: created with `from_bytes(der)`. It
  returns the following:
  - validity as `(not_before, not_after)` in Unix epoch seconds
  - the serial number
  - the DER bytes of the TBS certificate, the subject, the issuer and the
    subject public key info
  - the signature algorithm OID and the signature bytes
  - the OIDs of the critical extensions
  - the extensions listed above
- `upkit_x509.errors`: `CertificateParsingError` and
  `CertificateParsingErrorKind`. `CertificateParser.from_bytes` raises
  `CertificateParsingError` with kind `CERTIFICATE_DECODING_ERROR` when the
  data cannot be decoded.

## Example

```python
from upkit_x509.basic_constraints import BasicConstraints
from upkit_x509.extended_key_usage import ExtendedKeyUsage
from upkit_x509.extensions import Extensions
from upkit_x509.key_usage import KeyUsage
from upkit_x509.parse import CertificateParser

extensions = Extensions()
extensions.add_basic_constraints(BasicConstraints.new_leaf())
extensions.add_key_usage([KeyUsage.DIGITAL_SIGNATURE])
extensions.add_extended_key_usage([ExtendedKeyUsage.PKIX_SERVER_AUTH])
cryptography_extensions = extensions.to_cryptography()

with open("leaf.der", "rb") as handle:
    parser = CertificateParser.from_bytes(handle.read())
print(parser.get_serial_number())
print(parser.get_key_usage())
print(parser.get_extended_key_usage())
```

## What it does not do

- It does not sign or assemble certificates. `Extensions` only produces the
  extension values, which you pass to `cryptography`'s own certificate
  builder.
- It does not validate certificate paths.
- It does not decode distinguished names into their attributes. The parser
  gives the subject and issuer only as DER bytes.
- It does not handle the subject or issuer alternative name extensions, or
  Authority Information Access.
- It does not read PEM. Input must be DER.