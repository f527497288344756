'''
### Mpeg Module

FSB5 stores MPEG samples as plain MPEG audio frames, which are already playable on their
own, so rebuilding them returns the bytes unchanged.
'''

def build_mpeg(data, frequency: int = 0, channels: int = 0) -> bytes:
  return bytes(data)

if __name__ == '__main__':
  pass
