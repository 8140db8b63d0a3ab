import argparse
import asyncio
import logging

from nanoleaf_api import Nanoleaf, NanoleafError, NanoleafState, SetValue


async def cycle(host, token, seconds):
    async with Nanoleaf(host) as nanoleaf:
        if not token:
            # hold the power button for 5-7 seconds before pairing
            auth = await nanoleaf.add_user()
            token = auth.auth_token
            print(f"paired, token: {token}")
        info = await nanoleaf.get_panels(token)
        print(f"{info.name} ({info.model}, firmware {info.firmware_version})")
        await nanoleaf.set_state(token, NanoleafState.ON)
        await nanoleaf.set_brightness(token, SetValue(80))
        for effect in await nanoleaf.list_effects(token):
            try:
                await nanoleaf.set_effect(token, effect)
            except NanoleafError as ex:
                print(f"cannot select {effect}: {ex}")
                continue
            print(f"showing {effect}")
            await asyncio.sleep(seconds)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="nanoleaf_api examples")
    parser.add_argument("--host", dest="host", type=str, required=True)
    parser.add_argument("--token", dest="token", type=str, default=None)
    parser.add_argument("--seconds", dest="seconds", type=int, default=5)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    asyncio.run(cycle(args.host, args.token, args.seconds))
